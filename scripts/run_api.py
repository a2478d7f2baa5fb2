#!/usr/bin/env python3
"""
MedCheck — Запуск API сервера

Запуск:
    python scripts/run_api.py
    python scripts/run_api.py --port 8080
    python scripts/run_api.py --host 127.0.0.1 --port 8000 --config config.yaml
"""

import sys
import os
import argparse
from pathlib import Path

# Додаємо корінь проекту до path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def main():
    parser = argparse.ArgumentParser(description='MedCheck API Server')
    parser.add_argument('--host', default='0.0.0.0', help='Host (default: 0.0.0.0)')
    parser.add_argument('--port', type=int, default=8000, help='Port (default: 8000)')
    parser.add_argument('--reload', action='store_true', help='Enable auto-reload')
    parser.add_argument('--config', default=None, help='YAML config (MedCheckConfig)')
    parser.add_argument('--catalog', default=None, help='JSON catalog of conditions')
    parser.add_argument('--log-level', default='info', help='Log level (default: info)')

    args = parser.parse_args()

    # create_app() читає налаштування з environment
    os.environ["API_HOST"] = args.host
    os.environ["API_PORT"] = str(args.port)
    os.environ["LOG_LEVEL"] = args.log_level.upper()
    if args.config:
        os.environ["MEDCHECK_CONFIG"] = args.config
    if args.catalog:
        os.environ["MEDCHECK_CATALOG"] = args.catalog

    print("=" * 60)
    print("🏥 MedCheck — API Server")
    print("=" * 60)
    print(f"   Host: {args.host}")
    print(f"   Port: {args.port}")
    print(f"   Reload: {args.reload}")
    print(f"   Config: {args.config or 'default'}")
    print("=" * 60)

    import uvicorn

    # Один процес: сховище живе в пам'яті процесу
    uvicorn.run(
        "medcheck.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=1,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
