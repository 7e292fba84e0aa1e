import requests
from bedrock_shared.schemas.prompt import PromptRequest, PromptResponse


class PromptGatewayError(Exception):
    """Non-2xx answer from the gateway; carries its plain-text message."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"Gateway returned {status_code}: {message}")
        self.status_code = status_code
        self.message = message


class PromptGatewayClient:
    def __init__(self, base_url: str, timeout: int = 30):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

    def health_check(self) -> bool:
        try:
            response = self.session.get(
                f"{self.base_url}/health",
                timeout=self.timeout
            )
            response.raise_for_status()
            return response.json().get("status") == "ok"
        except (requests.exceptions.RequestException, ValueError):
            return False

    def send_prompt(self, prompt: str, model: str) -> PromptResponse:
        request_data = PromptRequest(prompt=prompt, model=model)

        try:
            response = self.session.post(
                f"{self.base_url}/api/send-prompt",
                json=request_data.model_dump(),
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout:
            raise TimeoutError(f"Request timed out after {self.timeout} seconds")
        except requests.exceptions.RequestException as e:
            raise ConnectionError(f"Request failed: {str(e)}")

        if not response.ok:
            raise PromptGatewayError(response.status_code, response.text.strip())
        return PromptResponse(**response.json())
