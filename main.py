# main.py
import sys

from aoc_search.app.cli import main

if __name__ == "__main__":
    # e.g. python main.py 2021 23 --input 2021_23.txt
    sys.exit(main())
