from bank_marketing.pipeline import PipelineRunner


def main() -> None:
    """Train on bank.csv and report metrics on bank-full.csv."""
    runner = PipelineRunner("config/default.yaml")
    runner.run()


if __name__ == "__main__":
    main()
