from linlearn.cli import main


raise SystemExit(main())
