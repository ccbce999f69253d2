import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from cli.dnp3_decode import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
