from skillradar.cli import main

raise SystemExit(main())
