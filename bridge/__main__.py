"""Run the bridge:  python -m bridge"""

import logging

import uvicorn

from bridge.app import create_app
from bridge.config import get_host, get_port


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [bridge] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    host, port = get_host(), get_port()
    logging.getLogger(__name__).info("Bridge server starting on http://%s:%d", host, port)
    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    main()
