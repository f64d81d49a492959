from stlc.cli import main

raise SystemExit(main())
