from graph_bridge.main import main

raise SystemExit(main())
