# scripts/extract_resume.py
import argparse
import sys

from cover_extract.main import run_resume


def main():
    parser = argparse.ArgumentParser(description="Pull contact details and sections out of a PDF/DOCX resume.")
    parser.add_argument("path")
    parser.add_argument("--config", default="config/config.yaml")
    args = parser.parse_args()
    sys.exit(run_resume(args.path, args.config))


if __name__ == "__main__":
    main()
