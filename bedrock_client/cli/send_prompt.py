import argparse
import sys

from bedrock_client.sdk.client import PromptGatewayClient


def main() -> None:
    parser = argparse.ArgumentParser(description="Send a prompt through the Bedrock gateway")
    parser.add_argument(
        "--url",
        type=str,
        default="http://localhost:3000",
        help="Gateway URL (default: http://localhost:3000)",
    )
    parser.add_argument(
        "--prompt",
        type=str,
        required=True,
        help="Input prompt text",
    )
    parser.add_argument(
        "--model",
        type=str,
        required=True,
        help="Bedrock model identifier",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=30,
        help="Request timeout in seconds (default: 30)",
    )

    args = parser.parse_args()

    client = PromptGatewayClient(base_url=args.url, timeout=args.timeout)

    try:
        if not client.health_check():
            print("ERROR: Gateway health check failed", file=sys.stderr)
            sys.exit(1)

        response = client.send_prompt(prompt=args.prompt, model=args.model)

        print(f"Response: {response.response}")
    except Exception as e:
        print(f"ERROR: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
