"""Allow ``python -m ChunkSort``."""

from ChunkSort.cli import main

if __name__ == "__main__":
    main()
