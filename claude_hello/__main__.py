from claude_hello.run import main

raise SystemExit(main())
