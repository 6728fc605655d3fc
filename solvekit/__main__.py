from .io.cli import main

raise SystemExit(main())
