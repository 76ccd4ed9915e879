"""Package entry point for ``python -m subtitle_segmenter``."""

from subtitle_segmenter.cli import main

if __name__ == "__main__":
    main()
