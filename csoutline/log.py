import logging
import sys


def setup_logging(level: str = "WARNING") -> None:
	lvl = getattr(logging, level.upper(), logging.WARNING)
	handler = logging.StreamHandler(sys.stdout)
	fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")
	handler.setFormatter(fmt)
	root = logging.getLogger()
	root.handlers.clear()
	root.addHandler(handler)
	root.setLevel(lvl)
