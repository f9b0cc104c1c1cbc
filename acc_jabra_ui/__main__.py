from acc_jabra_ui.cli import main

raise SystemExit(main())
