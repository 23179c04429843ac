import argparse
import sys
import os
import logging
import socket

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from urdu_summarizer.api_server import run_api_server

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(message)s')
logger = logging.getLogger("Main")


def get_free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(('', 0))
        return s.getsockname()[1]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Urdu article summarizer web server")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, required=False, default=0)
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    # 포트 미지정(0 이하) 시 빈 포트 자동 할당
    port = args.port
    if not port or port <= 0:
        port = get_free_port()

    logger.info(f"Starting summarizer on http://{args.host}:{port}")

    try:
        run_api_server(args.host, port)
    except KeyboardInterrupt:
        logger.info("User interrupted.")


if __name__ == "__main__":
    main()
