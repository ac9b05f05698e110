from linepreview.cli import main

raise SystemExit(main())
