#!/usr/bin/env python
"""
企业端招聘管理后端启动脚本

用法:
    python run.py                    # 默认启动 (127.0.0.1:8000)
    python run.py -p 8080            # 指定端口
    python run.py --host 0.0.0.0     # 允许外网访问
    python run.py --reload           # 开启热重载
"""
import argparse
import sys
from pathlib import Path

import uvicorn

# 确保项目根目录在 Python 路径中
ROOT_DIR = Path(__file__).parent
sys.path.insert(0, str(ROOT_DIR))


def parse_args():
    """解析命令行参数"""
    parser = argparse.ArgumentParser(
        description="企业端招聘管理后端启动脚本",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-p", "--port", type=int, default=8000, help="服务端口 (默认: 8000)")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="服务地址 (默认: 127.0.0.1)")
    parser.add_argument("--reload", action="store_true", help="开启热重载 (开发模式)")
    parser.add_argument("--workers", type=int, default=1, help="工作进程数 (默认: 1)")
    return parser.parse_args()


def prepare_dirs():
    """创建数据库与公告文件目录"""
    from app.core.config import settings

    for directory in (ROOT_DIR / "data", Path(settings.jobpost_file_dir)):
        if not directory.exists():
            directory.mkdir(parents=True)
            print(f"✅ 目录已创建: {directory}")


def main():
    """主函数"""
    args = parse_args()

    print("=" * 50)
    print("  企业端招聘管理后端服务")
    print("=" * 50)

    prepare_dirs()

    print(f"\n🚀 启动服务...")
    print(f"   地址: http://{args.host}:{args.port}")
    print(f"   文档: http://{args.host}:{args.port}/docs")
    print(f"   热重载: {'开启' if args.reload else '关闭'}")
    print("\n" + "-" * 50 + "\n")

    try:
        uvicorn.run(
            "app.main:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
            workers=args.workers if not args.reload else 1,
            log_level="info",
        )
    except KeyboardInterrupt:
        print("\n👋 服务已停止")


if __name__ == "__main__":
    main()
