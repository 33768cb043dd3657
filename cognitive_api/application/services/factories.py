from __future__ import annotations

from dataclasses import dataclass

from pydantic import SecretStr

from cognitive_api.core.config import Settings
from cognitive_api.domain.lro.models import PollPolicy
from cognitive_api.domain.lro.poller import LroPoller
from cognitive_api.domain.ports.language_port import SummarizationPort
from cognitive_api.domain.ports.media_port import MediaStorePort
from cognitive_api.domain.ports.speech_port import SpeechRecognitionPort, SpeechSynthesisPort
from cognitive_api.domain.ports.translator_port import TranslatorPort
from cognitive_api.domain.ports.vision_port import ReadPort
from cognitive_api.infrastructure.clients.language_http import LanguageHttpClient
from cognitive_api.infrastructure.clients.speech_sdk import AzureSpeechClient
from cognitive_api.infrastructure.clients.translator_http import TranslatorHttpClient
from cognitive_api.infrastructure.clients.vision_http import VisionReadHttpClient
from cognitive_api.infrastructure.storage.media_store import LocalMediaStore


@dataclass
class Gateways:
    """Remote service handles used by the request handlers.

    Built once in the lifespan and kept on `app.state.gateways`; tests replace
    individual members with fakes.
    """

    summarizer: SummarizationPort
    translator: TranslatorPort
    reader: ReadPort
    synthesizer: SpeechSynthesisPort
    recognizer: SpeechRecognitionPort
    media_store: MediaStorePort


def _secret(value: SecretStr | None) -> str | None:
    return value.get_secret_value() if value is not None else None


def build_poll_policy(s: Settings) -> PollPolicy:
    return PollPolicy(
        poll_interval_seconds=s.POLL_INTERVAL_SECONDS,
        max_attempts=s.POLL_MAX_ATTEMPTS,
        max_wait_seconds=s.POLL_MAX_WAIT_SECONDS,
    )


def build_poller(s: Settings, operation: str) -> LroPoller:
    return LroPoller(build_poll_policy(s), operation=operation)


def build_media_store(s: Settings) -> LocalMediaStore:
    return LocalMediaStore(base_dir=s.MEDIA_DIR, url_for=s.media_url)


def build_language_client(s: Settings) -> LanguageHttpClient:
    return LanguageHttpClient(
        s.AZURE_LANGUAGE_ENDPOINT,
        _secret(s.AZURE_LANGUAGE_KEY),
        api_version=s.LANGUAGE_API_VERSION,
        timeout_seconds=s.HTTP_TIMEOUT_SECONDS,
        verify_ssl=s.HTTP_VERIFY_SSL,
    )


def build_translator_client(s: Settings) -> TranslatorHttpClient:
    return TranslatorHttpClient(
        s.AZURE_TRANSLATOR_ENDPOINT,
        _secret(s.AZURE_TRANSLATOR_KEY),
        region=s.AZURE_TRANSLATOR_REGION,
        timeout_seconds=s.HTTP_TIMEOUT_SECONDS,
        verify_ssl=s.HTTP_VERIFY_SSL,
    )


def build_vision_client(s: Settings) -> VisionReadHttpClient:
    return VisionReadHttpClient(
        s.AZURE_VISION_ENDPOINT,
        _secret(s.AZURE_VISION_KEY),
        timeout_seconds=s.HTTP_TIMEOUT_SECONDS,
        verify_ssl=s.HTTP_VERIFY_SSL,
    )


def build_speech_client(s: Settings) -> AzureSpeechClient:
    return AzureSpeechClient(
        _secret(s.AZURE_SPEECH_KEY),
        s.AZURE_SPEECH_REGION,
        recognition_language=s.STT_LANGUAGE,
    )


def build_gateways(s: Settings) -> Gateways:
    speech = build_speech_client(s)
    return Gateways(
        summarizer=build_language_client(s),
        translator=build_translator_client(s),
        reader=build_vision_client(s),
        synthesizer=speech,
        recognizer=speech,
        media_store=build_media_store(s),
    )
