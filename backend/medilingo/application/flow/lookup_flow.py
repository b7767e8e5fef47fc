"""
Lookup Flow

Sequences the collaborators for one user action (text search or image
capture) and keeps the dashboard session up to date.

Steps:
    1. VISION   - image only: guess the medicine name from the photo
    2. CONFIRM  - resolve the name to a canonical brand name (hard dependency)
    3. LABEL    - load the label record; shown as soon as it arrives
    4. GENERATE - background explanation; never blocks step 3's result
"""

from typing import Optional, Set
import asyncio
import logging

from .request_token import RequestToken, RequestTokenSource
from .session import SessionState
from ..services.image_analysis_service import ImageAnalysisService
from ..services.preference_store import PreferenceStore
from ..services.prompt_builder import PromptBuilder
from ...cross_cutting.error_handling import ErrorHandler
from ...cross_cutting.logging import FlowLogger
from ...cross_cutting.validation import normalize_query
from ...domain.entities.drug_record import FdaRecord
from ...domain.exceptions import EmptyQueryError
from ...domain.ports.drug_record_lookup import DrugRecordLookupPort
from ...domain.ports.text_generator import TextGeneratorPort


logger = logging.getLogger(__name__)


class LookupFlow:
    """
    Orchestrates vision analysis, drug-record lookup and text generation.

    Runs on the event loop; blocking collaborator adapters are called in
    worker threads. Failures are turned into notifications and never leave
    the action that caused them. Results of an action superseded by a newer
    one are discarded.

    Usage:
        flow = LookupFlow(session, image_analysis, drug_records, generator, preferences)
        await flow.search("Tylenol")
        await flow.wait_for_pending()   # optional: let generation finish
    """

    def __init__(
        self,
        session: SessionState,
        image_analysis: ImageAnalysisService,
        drug_records: DrugRecordLookupPort,
        generator: TextGeneratorPort,
        preferences: PreferenceStore,
        prompt_builder: Optional[PromptBuilder] = None,
        tokens: Optional[RequestTokenSource] = None
    ):
        self.session = session
        self.image_analysis = image_analysis
        self.drug_records = drug_records
        self.generator = generator
        self.preferences = preferences
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.tokens = tokens or RequestTokenSource()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self._pending: Set[asyncio.Task] = set()

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------

    async def search(self, query: Optional[str]) -> bool:
        """
        Look up a medicine typed by the user.

        Returns:
            True if a label record was displayed
        """
        try:
            name = normalize_query(query)
        except EmptyQueryError as e:
            self.session.notifications.error(e.message)
            return False

        token = self.tokens.issue("search")
        self.session.search_query = query
        self.session.is_analyzing = False
        self._discard_previous_results()

        return await self._lookup(name, token, FlowLogger(token.value, token.action))

    async def capture_image(
        self,
        image_url: Optional[str],
        token: Optional[RequestToken] = None,
        notify_vision_errors: bool = True
    ) -> bool:
        """
        Identify a medicine from an image data URL, then look it up.

        Args:
            image_url: Base64 data URL of the photo
            token: Token already issued for this action by the caller
            notify_vision_errors: Raise a notification when analysis fails;
                callers that report the failure themselves pass False

        Returns:
            True if a label record was displayed
        """
        token = token or self.tokens.issue("image")
        flog = FlowLogger(token.value, token.action)
        self._discard_previous_results()

        flog.step_start("vision")
        result = None
        with ErrorHandler(self.logger, context="vision", suppress=True,
                          fallback_message="Failed to analyze image") as handler:
            result = await asyncio.to_thread(self.image_analysis.analyze, image_url)
        flog.step_end("vision", success=not handler.has_error)

        if not self.tokens.is_current(token):
            flog.stale("vision")
            return False

        if handler.has_error:
            if notify_vision_errors:
                self.session.notifications.error(handler.user_message)
            return False

        self.session.image_analysis = result
        if not result.has_medicine_name:
            self.session.notifications.error("Could not find a medicine name in the image")
            return False

        self.session.search_query = result.medicine_name
        return await self._lookup(result.medicine_name, token, flog)

    def update_search_query(self, text: str) -> None:
        """Track the search box; emptying it resets the selection."""
        if text == "":
            self.clear_search()
        else:
            self.session.search_query = text

    def clear_search(self) -> None:
        """Reset the selected medicine and any image analysis."""
        self.tokens.invalidate()
        self.session.search_query = ""
        self.session.clear_selection()
        self.session.is_loading = False
        self.session.is_analyzing = False

    async def wait_for_pending(self) -> None:
        """Wait for background generation tasks to settle."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    @property
    def has_pending(self) -> bool:
        return bool(self._pending)

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _discard_previous_results(self) -> None:
        self.session.image_analysis = None
        self.session.generated_explanation = None
        self.session.is_generating = False

    async def _lookup(self, name: str, token: RequestToken, flog: FlowLogger) -> bool:
        self.session.is_loading = True

        flog.step_start("confirm")
        confirmed = None
        with ErrorHandler(self.logger, context="confirm", suppress=True,
                          fallback_message="Failed to find medicine") as handler:
            confirmed = await asyncio.to_thread(self.drug_records.confirm, name)
        flog.step_end("confirm", success=not handler.has_error)

        if not self.tokens.is_current(token):
            flog.stale("confirm")
            return False
        if handler.has_error:
            self.session.is_loading = False
            self.session.notifications.error(handler.user_message)
            return False

        flog.step_start("label")
        record = None
        with ErrorHandler(self.logger, context="label", suppress=True,
                          fallback_message="Failed to load medicine information") as handler:
            record = await asyncio.to_thread(self.drug_records.fetch_label, confirmed.brand_name)
        flog.step_end("label", success=not handler.has_error)

        if not self.tokens.is_current(token):
            flog.stale("label")
            return False
        if handler.has_error:
            self.session.is_loading = False
            self.session.notifications.error(handler.user_message)
            return False

        self.session.selected_medicine = confirmed.brand_name
        self.session.fda_record = record
        self.session.is_loading = False

        self._schedule_generation(record, confirmed.brand_name, token, flog)
        return True

    def _schedule_generation(
        self,
        record: FdaRecord,
        medicine_name: str,
        token: RequestToken,
        flog: FlowLogger
    ) -> None:
        settings = self.preferences.read()
        prompt = self.prompt_builder.build(record, settings, medicine_name=medicine_name)
        prompt_text = self.prompt_builder.render(prompt)
        options = {"language": settings.language.code}

        self.session.is_generating = True
        task = asyncio.create_task(self._generate(prompt_text, options, token, flog))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _generate(self, prompt_text: str, options: dict, token: RequestToken, flog: FlowLogger) -> None:
        flog.step_start("generate")
        text = None
        with ErrorHandler(self.logger, context="generate", suppress=True,
                          fallback_message="Failed to generate explanation") as handler:
            text = await asyncio.to_thread(self.generator.generate, prompt_text, options)
        flog.step_end("generate", success=not handler.has_error)

        if not self.tokens.is_current(token):
            flog.stale("generate")
            return

        self.session.is_generating = False
        if handler.has_error:
            self.session.notifications.error(handler.user_message)
            return

        self.session.generated_explanation = text
        self.session.notifications.success("Explanation ready")
