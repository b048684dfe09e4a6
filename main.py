"""MemeMaker caption style entry point."""

import json
import sys

from PySide6.QtCore import QCoreApplication

from mememaker.services.app_logger import configure_logging
from mememaker.services.meme_texts import clear_top_and_bottom_texts
from mememaker.services.text_style_store import TextStyleStore
from mememaker.utils.config import APP_NAME, APP_VERSION, BOTTOM_ATTR_KEY, ORG_NAME, TOP_ATTR_KEY

USAGE = "usage: main.py [show [KEY ...] | clear]"


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    QCoreApplication.setOrganizationName(ORG_NAME)
    QCoreApplication.setApplicationName(APP_NAME)
    QCoreApplication.setApplicationVersion(APP_VERSION)
    configure_logging()

    command = argv[0] if argv else "show"
    store = TextStyleStore()

    if command == "show":
        for key in argv[1:] or [TOP_ATTR_KEY, BOTTOM_ATTR_KEY]:
            style = store.load_or_default(key)
            print(f"{key}: {json.dumps(style.to_dict(), ensure_ascii=False)}")
        return 0

    if command == "clear":
        return 0 if clear_top_and_bottom_texts(store) else 1

    print(USAGE, file=sys.stderr)
    return 2


if __name__ == "__main__":
    sys.exit(main())
