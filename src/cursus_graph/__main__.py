import sys

from cursus_graph.cli import main

if __name__ == "__main__":
    sys.exit(main())
