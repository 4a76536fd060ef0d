import sys
import logging

from .selftest import run_tests

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(message)s')
    sys.exit(0 if run_tests() else 1)
