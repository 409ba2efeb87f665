from gotoh.cli import main

raise SystemExit(main())
