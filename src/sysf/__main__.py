from sysf.cli import main

raise SystemExit(main())
