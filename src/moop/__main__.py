from moop.cli import main

raise SystemExit(main())
