"""Allow running word-stems as ``python -m word_stems``."""

from word_stems.cli import main

raise SystemExit(main())
