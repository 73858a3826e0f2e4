from typing import List

from storeqa.api.factories.data_factory import generate_id
from storeqa.api.models import ChatMessage, CompletionRequest, TestScenario, ValidationCase

SAMPLE_PROMPTS = [
    "What is the capital of France?",
    "Explain machine learning in simple terms",
    "Write a haiku about nature",
    "What are the benefits of exercise?",
    "Describe the color blue",
    "How do computers work?",
    "Give me a recipe for pancakes",
    "What is the meaning of life?",
    "Tell me a joke",
    "Explain blockchain technology",
]


def _user_request(model: str, content: str, **params) -> CompletionRequest:
    return CompletionRequest(model=model, messages=[ChatMessage(role="user", content=content)], **params)


class LocalApiDataFactory:
    """Completion requests and scenario tables for the local LLM suites."""

    @staticmethod
    def create_basic_request(model: str, content: str) -> CompletionRequest:
        return _user_request(model, content, max_tokens=50, temperature=0.7)

    @staticmethod
    def create_with_system_prompt(model: str, system_content: str, user_content: str) -> CompletionRequest:
        return CompletionRequest(
            model=model,
            messages=[
                ChatMessage(role="system", content=system_content),
                ChatMessage(role="user", content=user_content),
            ],
            max_tokens=100,
            temperature=0.5,
        )

    @staticmethod
    def create_conversation(model: str, turns: int = 3) -> CompletionRequest:
        messages = [
            ChatMessage(role="system", content="You are a helpful assistant"),
            ChatMessage(role="user", content="My name is TestUser"),
            ChatMessage(role="assistant", content="Hello TestUser! How can I help you today?"),
        ]
        for i in range(1, turns + 1):
            messages.append(ChatMessage(role="user", content=f"Question {i}"))
            messages.append(ChatMessage(role="assistant", content=f"Answer {i}"))
        return CompletionRequest(model=model, messages=messages, max_tokens=100, temperature=0.7)

    @staticmethod
    def create_edge_case_scenarios(model: str) -> List[TestScenario]:
        return [
            TestScenario(
                name="Empty content",
                request=_user_request(model, "", max_tokens=10),
                expected_behavior="Handle gracefully or return error",
            ),
            TestScenario(
                name="Very long content",
                request=_user_request(model, "A" * 2000, max_tokens=10),
                expected_behavior="Process without timeout",
            ),
            TestScenario(
                name="Special characters",
                request=_user_request(model, "Test: @#$%^&*()_+-=[]{}|;':\",./<>?", max_tokens=10),
                expected_behavior="Handle special chars correctly",
            ),
            TestScenario(
                name="Unicode content",
                request=_user_request(model, "Hello 你好 नमस्ते مرحبا 🌍", max_tokens=20),
                expected_behavior="Support multilingual input",
            ),
            TestScenario(
                name="Code snippet",
                request=_user_request(
                    model, '```python\ndef hello():\n    return "world"\n```\nWhat does this do?', max_tokens=50
                ),
                expected_behavior="Process code blocks",
            ),
        ]

    @staticmethod
    def create_temperature_variations(model: str) -> List[CompletionRequest]:
        return [
            _user_request(model, "Describe a color in one word", max_tokens=15, temperature=t)
            for t in (0.0, 0.3, 0.5, 0.7, 1.0)
        ]

    @staticmethod
    def create_max_tokens_tests(model: str) -> List[CompletionRequest]:
        return [
            _user_request(model, "Write a long story about space exploration", max_tokens=n, temperature=0.7)
            for n in (1, 5, 10, 50, 100)
        ]

    @staticmethod
    def create_stress_test_batch(model: str, count: int) -> List[CompletionRequest]:
        return [
            _user_request(model, f"Stress test request {i + 1} at {generate_id()}", max_tokens=20, temperature=0.5)
            for i in range(count)
        ]

    @staticmethod
    def create_validation_tests() -> List[ValidationCase]:
        hello = [{"role": "user", "content": "Hello"}]
        return [
            ValidationCase(name="Valid request", data={"model": "test-model", "messages": hello}, expected_status=200),
            ValidationCase(name="Missing model", data={"messages": hello}, expected_status=400),
            ValidationCase(name="Missing messages", data={"model": "test-model"}, expected_status=400),
            ValidationCase(
                name="Empty messages array", data={"model": "test-model", "messages": []}, expected_status=400
            ),
            ValidationCase(
                name="Invalid role",
                data={"model": "test-model", "messages": [{"role": "invalid", "content": "Hello"}]},
                expected_status=400,
            ),
        ]

    @staticmethod
    def create_performance_scenarios(model: str) -> List[TestScenario]:
        return [
            TestScenario(
                name="Quick response",
                request=_user_request(model, "Hi", max_tokens=10, temperature=0.1),
                expected_behavior="Response under 5 seconds",
            ),
            TestScenario(
                name="Long generation",
                request=_user_request(model, "Write a poem", max_tokens=200, temperature=0.7),
                expected_behavior="Complete within token limit",
            ),
            TestScenario(
                name="Complex reasoning",
                request=_user_request(model, "Explain quantum computing step by step", max_tokens=150, temperature=0.3),
                expected_behavior="Structured, coherent response",
            ),
        ]

    @staticmethod
    def generate_test_id() -> str:
        return f"test-{generate_id()}"

    @staticmethod
    def get_sample_prompts() -> List[str]:
        return list(SAMPLE_PROMPTS)
