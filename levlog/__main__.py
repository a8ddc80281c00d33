from levlog.cli import main

raise SystemExit(main())
