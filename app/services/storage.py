"""
招聘公告文件存储模块

文件名规则: {yyyyMMddHHmmss}_{企业名称}.{扩展名}
"""
import re
import shutil
from datetime import datetime
from pathlib import Path
from typing import Optional

from fastapi import UploadFile
from loguru import logger

from app.core.config import settings
from app.core.exceptions import FileStoreError

DEFAULT_EXTENSION = "pdf"

_UNSAFE_CHARS = re.compile(r'[\\/:*?"<>|\s]+')


class JobpostFileStorage:
    """招聘公告文件存储"""

    def __init__(self, root: str | Path):
        self.root = Path(root)

    @staticmethod
    def build_filename(
        company_name: str,
        original_filename: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> str:
        """生成存储文件名"""
        now = now or datetime.now()
        ext = Path(original_filename or "").suffix.lstrip(".").lower() or DEFAULT_EXTENSION
        safe_name = _UNSAFE_CHARS.sub("_", company_name.strip())
        return f"{now.strftime('%Y%m%d%H%M%S')}_{safe_name}.{ext}"

    def _open_new(self, filename: str):
        """以独占方式创建文件，同名文件已存在时追加序号"""
        path = self.root / filename
        stem, suffix = path.stem, path.suffix
        counter = 0
        while True:
            try:
                return path, path.open("xb")
            except FileExistsError:
                counter += 1
                path = self.root / f"{stem}_{counter}{suffix}"

    def save(self, upload: UploadFile, company_name: str) -> str:
        """
        保存上传文件，返回存储路径

        不覆盖已有文件，同一秒内的重名文件名后追加 _1、_2 ...
        """
        filename = self.build_filename(company_name, upload.filename)
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            upload.file.seek(0)
            path, buffer = self._open_new(filename)
            with buffer:
                shutil.copyfileobj(upload.file, buffer)
        except OSError as e:
            logger.error(f"fail to store file: name={upload.filename}, exception={e}")
            raise FileStoreError(upload.filename) from e

        logger.info(f"公告文件已保存: {path}")
        return str(path)

    def remove(self, path: str) -> None:
        """删除被替换的旧文件"""
        try:
            Path(path).unlink(missing_ok=True)
        except OSError as e:
            logger.error(f"fail to remove file: path={path}, exception={e}")
            raise FileStoreError(path) from e


def get_file_storage() -> JobpostFileStorage:
    """文件存储依赖注入"""
    return JobpostFileStorage(settings.jobpost_file_dir)
