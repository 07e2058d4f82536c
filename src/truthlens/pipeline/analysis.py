"""End-to-end analysis pipeline."""

import logging
import time
import uuid
from typing import Any

from truthlens.assembler import assemble
from truthlens.config.models import HeuristicsConfig, LimitsConfig
from truthlens.data import (
    AnalysisKind,
    AnalysisResult,
    CredibilityHeuristic,
    ForensicsReport,
    MediaSubmission,
    Prompt,
    Submission,
    Surface,
    Usage,
)
from truthlens.errors import AuthenticationError, StorageError, ValidationError
from truthlens.extract import extract
from truthlens.forensics.base import MediaForensics
from truthlens.generator.base import NarrativeGenerator
from truthlens.heuristics import score_content
from truthlens.normalize import Normalizer, validate_media
from truthlens.prompts import build_prompt, describe_media
from truthlens.run_logger import RunLogger, RunRecord
from truthlens.store.base import Notifier, ResultStore

logger = logging.getLogger(__name__)


def new_request_id() -> str:
    return f"req_{uuid.uuid4().hex[:12]}"


class AnalysisPipeline:
    """Run fact-check, bias and media-authenticity analyses.

    Flow for text submissions:
    1. Normalize the submission (fetching and stripping URLs)
    2. Score the normalized text with the local heuristics
    3. Build the kind's prompt and request a narrative
    4. Extract typed fields from the narrative
    5. Assemble the result, then persist and notify on the app surface

    Media submissions are validated, scored by the forensics collaborator
    (when configured) and described to the narrative generator instead.

    The pipeline keeps no per-request state, so one instance can serve any
    number of concurrent requests.

    Args:
        generator: Narrative generator.
        forensics: Optional media-forensics collaborator.
        store: Result store used on the app surface.
        notifier: Notifier used on the app surface.
        limits: Input ceilings and fetch settings.
        heuristics: Keyword sets and thresholds.
        run_logger: Optional RunLogger for per-stage logging.
    """

    def __init__(
        self,
        generator: NarrativeGenerator,
        *,
        forensics: MediaForensics | None = None,
        store: ResultStore | None = None,
        notifier: Notifier | None = None,
        limits: LimitsConfig | None = None,
        heuristics: HeuristicsConfig | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        self._generator = generator
        self._forensics = forensics
        self._store = store
        self._notifier = notifier
        self._limits = limits or LimitsConfig()
        self._heuristics = heuristics or HeuristicsConfig()
        self._normalizer = Normalizer(self._limits)
        self._run_logger = run_logger

    async def analyze(
        self,
        submission: Submission,
        *,
        surface: Surface = Surface.EXTENSION,
        user_id: str | None = None,
        request_id: str | None = None,
    ) -> tuple[AnalysisResult, Usage]:
        """Analyze a text or URL submission.

        Args:
            submission: Text or URL to analyze, with its kind.
            surface: Surface the request arrived on.
            user_id: Signed-in user, required on the app surface.
            request_id: Identifier used in logs. Generated if omitted.

        Returns:
            Tuple of (assembled result, usage).

        Raises:
            AuthenticationError: If the app surface is used without a user.
            ValidationError: If the submission is invalid.
            ExternalApiError: If the URL fetch or narrative call fails.
            StorageError: If the result could not be persisted.
        """
        request_id = request_id or new_request_id()
        self._authorize(surface, user_id)
        if submission.kind is AnalysisKind.MEDIA_AUTHENTICITY:
            raise ValidationError("Media must be submitted as a file upload.")

        logger.info(
            "%s request started [%s] (%d chars)",
            submission.kind,
            request_id,
            len(submission.content or ""),
        )
        record = self._start(request_id, submission.kind, surface, submission)
        usage = Usage()
        try:
            t0 = time.monotonic()
            normalized = await self._normalizer.normalize(submission, request_id=request_id)
            if normalized.was_fetched_from_url:
                usage.fetch_requests += 1
            self._stage(record, "normalize", "Normalizer", submission, normalized, None, t0)

            t0 = time.monotonic()
            heuristic = score_content(submission.kind, normalized.text, self._heuristics)
            self._stage(record, "heuristics", "score_content", None, heuristic, None, t0)

            prompt = build_prompt(
                submission.kind,
                normalized.text,
                max_chars=self._prompt_chars(submission.kind),
            )
            narrative, gen_usage = await self._generate(record, prompt, request_id)
            usage += gen_usage

            t0 = time.monotonic()
            baseline = (
                heuristic.baseline_score if isinstance(heuristic, CredibilityHeuristic) else None
            )
            extracted = extract(
                submission.kind, narrative, baseline=baseline, config=self._heuristics
            )
            self._stage(record, "extract", "extract", None, extracted, None, t0)

            t0 = time.monotonic()
            result = assemble(
                heuristic, extracted, narrative, submission.kind, content=normalized.text
            )
            self._stage(record, "assemble", "assemble", None, {"id": result.id}, None, t0)

            await self._persist(result, surface, user_id, request_id)
        except Exception as e:
            self._finish(record, None, usage, error=str(e))
            raise

        self._finish(record, result.id, usage)
        logger.info("%s completed [%s] score=%s", submission.kind, request_id, result.score)
        return (result, usage)

    async def verify_media(
        self,
        media: MediaSubmission | None,
        *,
        surface: Surface = Surface.EXTENSION,
        user_id: str | None = None,
        request_id: str | None = None,
    ) -> tuple[AnalysisResult, Usage]:
        """Verify an uploaded media file.

        The upload is checked against the surface's media policy before any
        network call is made.

        Raises:
            AuthenticationError: If the app surface is used without a user.
            ValidationError: If the file is missing, too large or unsupported.
            ExternalApiError: If the forensics or narrative call fails.
            StorageError: If the result could not be persisted.
        """
        request_id = request_id or new_request_id()
        self._authorize(surface, user_id)
        media = validate_media(media, self._limits.media_policy(surface))

        kind = AnalysisKind.MEDIA_AUTHENTICITY
        logger.info(
            "Media verification started [%s] (%s, %d bytes)",
            request_id,
            media.content_type,
            media.size,
        )
        record = self._start(request_id, kind, surface, media)
        usage = Usage()
        try:
            report: ForensicsReport | None = None
            if self._forensics is not None:
                t0 = time.monotonic()
                report, forensics_usage = await self._forensics.analyze(media)
                usage += forensics_usage
                component = type(self._forensics).__name__
                self._stage(record, "forensics", component, media, report, forensics_usage, t0)

            prompt = build_prompt(kind, describe_media(media))
            narrative, gen_usage = await self._generate(record, prompt, request_id)
            usage += gen_usage

            t0 = time.monotonic()
            extracted = extract(kind, narrative, config=self._heuristics)
            self._stage(record, "extract", "extract", None, extracted, None, t0)

            t0 = time.monotonic()
            result = assemble(
                None, extracted, narrative, kind, forensics=report, content=media.filename
            )
            self._stage(record, "assemble", "assemble", None, {"id": result.id}, None, t0)

            await self._persist(result, surface, user_id, request_id)
        except Exception as e:
            self._finish(record, None, usage, error=str(e))
            raise

        self._finish(record, result.id, usage)
        logger.info(
            "Media verification completed [%s] authenticity=%s", request_id, result.authenticity
        )
        return (result, usage)

    def _authorize(self, surface: Surface, user_id: str | None) -> None:
        if surface is Surface.APP and not user_id:
            raise AuthenticationError("Authentication required.")

    def _prompt_chars(self, kind: AnalysisKind) -> int | None:
        if kind is AnalysisKind.FACT_CHECK:
            return self._limits.fact_check_prompt_chars
        if kind is AnalysisKind.BIAS:
            return self._limits.bias_prompt_chars
        return None

    async def _generate(
        self, record: RunRecord | None, prompt: Prompt, request_id: str
    ) -> tuple[str, Usage]:
        t0 = time.monotonic()
        try:
            narrative, usage = await self._generator.generate(prompt)
        except Exception as e:
            logger.error("Narrative generation failed [%s]: %s", request_id, e)
            raise
        component = type(self._generator).__name__
        self._stage(record, "generate", component, prompt, {"chars": len(narrative)}, usage, t0)
        return (narrative, usage)

    async def _persist(
        self,
        result: AnalysisResult,
        surface: Surface,
        user_id: str | None,
        request_id: str,
    ) -> None:
        """Store and announce ``result`` on the app surface.

        Storage failures propagate; notification failures are logged only.
        """
        if surface is not Surface.APP or self._store is None:
            return

        try:
            result_id = await self._store.store(result, user_id=user_id)
        except StorageError:
            logger.error("Failed to store result [%s]", request_id)
            raise

        if self._notifier is None or user_id is None:
            return
        try:
            await self._notifier.notify(user_id, result.kind, result_id)
        except Exception as e:
            logger.warning("Notification failed [%s]: %s", request_id, e)

    def _start(
        self, request_id: str, kind: AnalysisKind, surface: Surface, submission: Any
    ) -> RunRecord | None:
        if self._run_logger is None:
            return None
        return self._run_logger.start_run(request_id, kind, surface, submission)

    def _stage(
        self,
        record: RunRecord | None,
        stage: str,
        component: str,
        input_data: Any,
        output_data: Any,
        usage: Usage | None,
        started: float,
    ) -> None:
        if self._run_logger is None:
            return
        self._run_logger.log_stage(
            record,
            stage=stage,
            component=component,
            input_data=input_data,
            output_data=output_data,
            usage=usage,
            duration_seconds=time.monotonic() - started,
        )

    def _finish(
        self,
        record: RunRecord | None,
        result_id: str | None,
        usage: Usage,
        *,
        error: str | None = None,
    ) -> None:
        if self._run_logger is None:
            return
        path = self._run_logger.finish_run(record, result_id=result_id, usage=usage, error=error)
        if path is not None:
            logger.info("Run log written to: %s", path)
