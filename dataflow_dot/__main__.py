from dataflow_dot.cli import main

raise SystemExit(main())
