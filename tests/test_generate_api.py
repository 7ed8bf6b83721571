import asyncio
import os
import unittest
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

# Never reach a real provider from the API tests.
os.environ.setdefault("OPENAI_API_KEY", "")
os.environ.setdefault("APP_ENV", "test")

from fastapi.testclient import TestClient

from coverletter.ai.factory import get_ai_client
from coverletter.ai.providers.openai_provider import OpenAIProvider
from coverletter.ai.types import AIConfigurationError, ChatMessage
from coverletter.main import app
from coverletter.services.prompts import SYSTEM_PROMPT, TONE_OPTIONS

GENERATED_LETTER = "\n\n".join(
    [
        "Dear Hiring Manager,",
        "I led a team of 5 engineers building Python services on AWS and reduced latency by 40%. "
        + " ".join(["context"] * 300),
        "I would bring the same focus on customer outcomes to your platform.",
        "Best regards,\nSam Rivera",
    ]
)

JOB_DESCRIPTION = (
    "We are hiring a Python engineer with AWS experience to build customer-facing "
    "services. The engineer will own services end to end."
)


class _FakeClient:
    def __init__(self, reply: str = GENERATED_LETTER, error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[list[ChatMessage]] = []

    async def complete(self, messages):
        self.calls.append(list(messages))
        if self.error is not None:
            raise self.error
        return self.reply


class _CodedError(Exception):
    def __init__(self, code: str):
        super().__init__(f"provider failure: {code}")
        self.code = code


class GenerateApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)
        cls.payload = {
            "job_description": JOB_DESCRIPTION,
            "tone": "Bold & Assertive",
            "key_strength": "Cut cloud spend by 30%",
        }

    def _post_with(self, fake: _FakeClient, payload: dict | None = None):
        with patch("coverletter.services.generation_service.get_ai_client", return_value=fake):
            return self.client.post("/v1/generate", json=payload or self.payload)

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy"})

    def test_generate_contract_shape(self):
        fake = _FakeClient()
        response = self._post_with(fake)
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertEqual(body["letter_content"], GENERATED_LETTER)
        self.assertIn("python", body["keywords"])
        self.assertIn("aws", body["keywords"])
        self.assertLessEqual(len(body["keywords"]), 15)
        self.assertGreaterEqual(body["impact_score"], 60)
        self.assertLessEqual(body["impact_score"], 95)
        self.assertTrue(body["refinement_suggestion"])

        metadata = body["metadata"]
        self.assertEqual(metadata["word_count"], len(GENERATED_LETTER.split()))
        self.assertEqual(metadata["character_count"], len(GENERATED_LETTER))
        self.assertEqual(metadata["tone"], "Bold & Assertive")
        self.assertEqual(metadata["keywords_found"], len(body["keywords"]))
        self.assertIsNone(metadata["refinement_type"])
        self.assertIn("generated_at", metadata)

    def test_generate_sends_system_and_user_prompts(self):
        fake = _FakeClient()
        self._post_with(fake)
        self.assertEqual(len(fake.calls), 1)
        system, user = fake.calls[0]
        self.assertEqual(system.role, "system")
        self.assertEqual(system.content, SYSTEM_PROMPT)
        self.assertEqual(user.role, "user")
        self.assertIn(JOB_DESCRIPTION, user.content)
        self.assertIn("Cut cloud spend by 30%", user.content)

    def test_refinement_request_reaches_prompt(self):
        fake = _FakeClient()
        payload = dict(self.payload)
        payload["refinement_type"] = "achievement-focused"
        payload["existing_letter"] = "Dear team, here is my first draft."
        response = self._post_with(fake, payload)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["metadata"]["refinement_type"], "achievement-focused")
        self.assertIn("here is my first draft", fake.calls[0][1].content)

    def test_tone_defaults_when_omitted(self):
        response = self._post_with(_FakeClient(), {"job_description": JOB_DESCRIPTION})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["metadata"]["tone"], "Professional & Formal")

    def test_short_job_description_is_rejected(self):
        fake = _FakeClient()
        response = self._post_with(fake, {"job_description": "   too short   "})
        self.assertEqual(response.status_code, 422)
        self.assertEqual(fake.calls, [])

    def test_missing_or_non_string_job_description_is_rejected(self):
        self.assertEqual(self._post_with(_FakeClient(), {"tone": "Bold & Assertive"}).status_code, 422)
        self.assertEqual(self._post_with(_FakeClient(), {"job_description": 12345678901}).status_code, 422)

    def test_unknown_refinement_type_is_rejected(self):
        payload = dict(self.payload)
        payload["refinement_type"] = "make-it-pop"
        self.assertEqual(self._post_with(_FakeClient(), payload).status_code, 422)

    def test_provider_error_codes_map_to_status(self):
        expectations = {
            "insufficient_quota": (429, "OpenAI API quota exceeded. Please try again later."),
            "invalid_api_key": (401, "Invalid OpenAI API key configuration."),
            "model_not_found": (503, "Requested AI model is not available."),
        }
        for code, (status_code, message) in expectations.items():
            response = self._post_with(_FakeClient(error=_CodedError(code)))
            self.assertEqual(response.status_code, status_code, msg=code)
            detail = response.json()["detail"]
            self.assertEqual(detail["error"], message)
            self.assertEqual(detail["code"], code)

    def test_unexpected_provider_error_hides_details(self):
        response = self._post_with(_FakeClient(error=RuntimeError("socket closed")))
        self.assertEqual(response.status_code, 500)
        detail = response.json()["detail"]
        self.assertEqual(detail["error"], "Failed to generate cover letter")
        self.assertEqual(detail["details"], "Internal server error")
        self.assertIn("timestamp", detail)

    def test_empty_generation_is_an_error(self):
        response = self._post_with(_FakeClient(reply="  \n "))
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["detail"]["code"], "empty_response")

    def test_unconfigured_provider(self):
        with patch(
            "coverletter.services.generation_service.get_ai_client",
            side_effect=AIConfigurationError("OpenAI API key is not configured"),
        ):
            response = self.client.post("/v1/generate", json=self.payload)
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["detail"]["code"], "llm_not_configured")

    def test_bad_provider_settings_return_error_detail(self):
        bad_envs = (
            {"AI_PROVIDER": "claude"},
            {"AI_PROVIDER": "openai", "OPENAI_API_KEY": "sk-test", "AI_TEMPERATURE": "warm"},
            {"AI_PROVIDER": "openai", "OPENAI_API_KEY": "sk-test", "AI_MAX_TOKENS": "lots"},
        )
        for env in bad_envs:
            with patch.dict(os.environ, env):
                response = self.client.post("/v1/generate", json=self.payload)
            self.assertEqual(response.status_code, 500, msg=env)
            detail = response.json()["detail"]
            self.assertEqual(detail["code"], "llm_not_configured", msg=env)
            self.assertEqual(detail["error"], "AI provider is not configured", msg=env)

    def test_custom_tone_is_accepted(self):
        payload = dict(self.payload)
        payload["tone"] = "Witty & Warm"
        response = self._post_with(_FakeClient(), payload)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["metadata"]["tone"], "Witty & Warm")

    def test_tones_lists_offered_options(self):
        response = self.client.get("/v1/tones")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["tones"], list(TONE_OPTIONS))
        self.assertEqual(body["default"], "Professional & Formal")

    def test_analyze_rescores_without_provider(self):
        with patch("coverletter.services.generation_service.get_ai_client") as factory:
            response = self.client.post(
                "/v1/analyze",
                json={"job_description": JOB_DESCRIPTION, "letter_content": GENERATED_LETTER},
            )
        factory.assert_not_called()
        self.assertEqual(response.status_code, 200)
        body = response.json()
        breakdown = body["score_breakdown"]
        self.assertEqual(breakdown["base"], 60)
        self.assertEqual(breakdown["structure_bonus"], 15)
        self.assertEqual(breakdown["length_bonus"], 15)
        self.assertEqual(body["impact_score"], breakdown["total"])
        self.assertGreaterEqual(body["impact_score"], 92)
        self.assertTrue(body["refinement_suggestion"])


class ProviderFactoryTests(unittest.TestCase):
    def test_placeholder_key_is_not_configured(self):
        with patch.dict(os.environ, {"AI_PROVIDER": "openai", "OPENAI_API_KEY": "your_openai_key"}):
            with self.assertRaises(AIConfigurationError):
                get_ai_client()

    def test_unsupported_provider(self):
        with patch.dict(os.environ, {"AI_PROVIDER": "claude"}):
            with self.assertRaises(AIConfigurationError):
                get_ai_client()

    def test_unparseable_numbers_are_configuration_errors(self):
        for name in ("AI_TEMPERATURE", "AI_MAX_TOKENS", "AI_TOP_P"):
            with patch.dict(os.environ, {"AI_PROVIDER": "openai", "OPENAI_API_KEY": "sk-test", name: "n/a"}):
                with self.assertRaises(AIConfigurationError, msg=name):
                    get_ai_client()

    def test_provider_is_reused_for_same_configuration(self):
        env = {"AI_PROVIDER": "openai", "OPENAI_API_KEY": "sk-reuse", "AI_MODEL": "gpt-4"}
        with patch.dict(os.environ, env):
            first = get_ai_client()
            second = get_ai_client()
        self.assertIs(first, second)
        with patch.dict(os.environ, dict(env, AI_MODEL="gpt-4o")):
            third = get_ai_client()
        self.assertIsNot(first, third)

    def test_openai_provider_from_env(self):
        env = {"AI_PROVIDER": "openai", "OPENAI_API_KEY": "sk-test", "AI_MODEL": "gpt-4o-mini"}
        with patch.dict(os.environ, env):
            client = get_ai_client()
        self.assertIsInstance(client, OpenAIProvider)
        self.assertEqual(client.model, "gpt-4o-mini")

    def test_complete_forwards_generation_parameters(self):
        provider = OpenAIProvider(model="gpt-4", api_key="sk-test", max_tokens=1234)
        create = AsyncMock(
            return_value=SimpleNamespace(
                choices=[SimpleNamespace(message=SimpleNamespace(content="Dear team"))]
            )
        )
        provider._client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))

        text = asyncio.run(provider.complete([ChatMessage(role="user", content="hi")]))

        self.assertEqual(text, "Dear team")
        kwargs = create.await_args.kwargs
        self.assertEqual(kwargs["model"], "gpt-4")
        self.assertEqual(kwargs["max_tokens"], 1234)
        self.assertEqual(kwargs["messages"], [{"role": "user", "content": "hi"}])
        self.assertEqual(kwargs["temperature"], 0.7)


if __name__ == "__main__":
    unittest.main()
