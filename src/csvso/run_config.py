import sys

from csvso.execution.config_executor import ConfigExecutor


def main():
    if len(sys.argv) != 2:
        print("Usage: python -m csvso.run_config <config.yaml>")
        sys.exit(1)

    config_path = sys.argv[1]
    executor = ConfigExecutor(config_path)
    results = executor.execute()

    print("\n=== Execution Completed ===")
    for result in results:
        print(f"{result.get('action')}: {result.get('message')}")


if __name__ == "__main__":
    main()
