from poi_clean.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
