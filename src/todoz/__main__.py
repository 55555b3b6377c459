# src/todoz/__main__.py

from .cli.main import main

raise SystemExit(main())
