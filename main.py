import argparse

import uvicorn

from ordquiz.app import app


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="HP ORD quiz server")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    uvicorn.run(app, host=args.host, port=args.port, log_level="info")
