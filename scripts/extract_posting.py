# scripts/extract_posting.py
import argparse
import sys

from cover_extract.main import run_posting


def main():
    parser = argparse.ArgumentParser(description="Fetch a job posting and pull out title, company and sections.")
    parser.add_argument("url")
    parser.add_argument("--config", default="config/config.yaml")
    parser.add_argument("--preview", action="store_true", help="include the flattened page text")
    args = parser.parse_args()
    sys.exit(run_posting(args.url, args.config, show_preview=args.preview))


if __name__ == "__main__":
    main()
