from locmerge.cli import main

raise SystemExit(main())
