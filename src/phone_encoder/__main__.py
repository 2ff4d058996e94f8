"""Run the phone number encoder: python -m phone_encoder encode WORDS NUMBERS."""
from phone_encoder.cli import cli


def main():
    """Console script entry point for phone-encoder."""
    cli()


if __name__ == "__main__":
    main()
