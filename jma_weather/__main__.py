import logging

import flet as ft

from .ui import run_app


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    ft.app(target=run_app)


if __name__ == "__main__":
    main()
