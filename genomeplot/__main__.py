from genomeplot.boxplot import main

raise SystemExit(main())
