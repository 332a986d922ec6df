import argparse
import logging

from .constants import IMAGE_FILENAME
from .session import ImageSession


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="grayhist",
        description="Skala szarości, histogram i wyrównanie histogramu obrazu (klawisze 1-5).",
    )
    parser.add_argument(
        "image",
        nargs="?",
        default=IMAGE_FILENAME,
        help=f"plik obrazu (domyślnie {IMAGE_FILENAME})",
    )
    parser.add_argument(
        "--lenient-gray",
        action="store_true",
        help="historyczna, łagodna reguła sprawdzania skali szarości",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="logi DEBUG")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)-20s - %(levelname)-8s - %(message)s",
        datefmt="%H:%M:%S",
    )

    from .app import App

    session = ImageSession(path=args.image, strict=not args.lenient_gray)
    App(session).mainloop()


if __name__ == "__main__":
    main()
