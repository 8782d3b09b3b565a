"""Application entry point"""
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

if __name__ == "__main__":
    from dnscontroller.main import main

    main(sys.argv[1:] or ["serve"])
