"""
Run with: python -m christmastree
"""
import sys

from christmastree.main import main

if __name__ == "__main__":
    sys.exit(main())
