import sys
import os

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

if __name__ == "__main__":
    from bookql.cli import serve_main
    sys.exit(serve_main())
