from lights_out.main import main

raise SystemExit(main())
