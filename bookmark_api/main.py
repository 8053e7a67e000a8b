import argparse
import logging

from . import create_app
from .config import Config


def main():
    parser = argparse.ArgumentParser(description='Bookmark API')
    parser.add_argument('--debug', action='store_true', help='Run in debug mode')
    parser.add_argument('--host', default='127.0.0.1', help='Interface to bind to')
    parser.add_argument('--port', type=int, default=Config.PORT, help='Port to run the server on')
    args = parser.parse_args()

    app = create_app()
    if args.debug:
        app.logger.setLevel(logging.DEBUG)
    app.logger.info(f'Server running on http://{args.host}:{args.port}')
    app.run(host=args.host, port=args.port, debug=args.debug, threaded=True)


if __name__ == '__main__':
    main()
