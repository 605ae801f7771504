"""Interactive reconciliation of unapproved licenses and modules.

The walk visits one state per distinct unapproved license, in the order
the licenses were first encountered, then optionally one state per
module still left unapproved. Every state takes one of three answers:

- ``Yes`` approves the entry and moves to the next state.
- ``No`` leaves the entry unapproved and moves to the next state.
- ``Save and Quit`` ends the walk, keeping what was approved so far.

The engine only builds the new allowlist. Persisting it is up to the
caller, which writes once after the walk ends.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Mapping, Optional, Sequence

from pydantic import BaseModel, Field

from license_allowlist.analysis.policy import (
    get_unapproved_licenses,
    get_unapproved_modules,
)
from license_allowlist.exceptions import PromptContractError
from license_allowlist.models.config import AllowlistConfig
from license_allowlist.models.module import ModuleRecord
from license_allowlist.reconcile.prompt import PromptFn, click_prompt

logger = logging.getLogger(__name__)

LICENSE_QUESTION = "Would you like to allow this license?"
MODIFY_MODULES_QUESTION = "Would you like to modify your approved module list?"
MODULE_QUESTION = "Would you like to allow this module anyway?"


class Answer(Enum):
    """Answers offered at each prompt. The first one is the default."""

    NO = "No"
    YES = "Yes"
    SAVE_AND_QUIT = "Save and Quit"


WALK_ANSWERS = (Answer.NO, Answer.YES, Answer.SAVE_AND_QUIT)
CONFIRM_ANSWERS = (Answer.NO, Answer.YES)


class WalkStatus(Enum):
    """Terminal state of a walk."""

    DONE = "done"
    QUIT = "quit"


class WalkResult(BaseModel):
    """Entries approved during one walk and how the walk ended."""

    model_config = {"extra": "forbid"}

    approved: list[str] = Field(default_factory=list)
    status: WalkStatus = WalkStatus.DONE

    @property
    def quit(self) -> bool:
        """Check if the operator chose Save and Quit."""
        return self.status is WalkStatus.QUIT


class ReconciliationResult(BaseModel):
    """Updated allowlist produced by a reconciliation run."""

    model_config = {"extra": "forbid"}

    config: AllowlistConfig
    quit: bool = Field(
        default=False,
        description="True if the walk was ended early with Save and Quit",
    )


class ReconciliationEngine:
    """Walk unapproved licenses and modules, collecting operator decisions."""

    def __init__(self, prompt: PromptFn = click_prompt) -> None:
        """Initialize the engine.

        Args:
            prompt: Callable taking a question and its answer labels and
                returning the selected label.
        """
        self._prompt = prompt

    def _ask(self, question: str, answers: Sequence[Answer]) -> Answer:
        """Ask one question and map the label back to an Answer.

        Raises:
            PromptContractError: If the prompt returns a label that was not
                offered.
        """
        labels = [answer.value for answer in answers]
        label = self._prompt(question, labels)
        if label not in labels:
            raise PromptContractError(
                f"Prompt returned {label!r}, expected one of {labels}"
            )
        return Answer(label)

    def review_licenses(
        self,
        unapproved_licenses: Sequence[str],
        existing_licenses: Sequence[str],
    ) -> WalkResult:
        """Ask about each unapproved license in turn.

        Args:
            unapproved_licenses: Distinct licenses in first-encounter order.
            existing_licenses: Licenses already approved; these are not
                offered again.

        Returns:
            WalkResult with the licenses approved, in answer order.
        """
        approved: list[str] = []
        offered = set(existing_licenses)

        for license_id in unapproved_licenses:
            if license_id in offered:
                continue
            offered.add(license_id)

            answer = self._ask(
                f"License '{license_id}' is not approved. {LICENSE_QUESTION}",
                WALK_ANSWERS,
            )
            if answer is Answer.SAVE_AND_QUIT:
                logger.info("Save and Quit at license %s", license_id)
                return WalkResult(approved=approved, status=WalkStatus.QUIT)
            if answer is Answer.YES:
                logger.debug("Approved license %s", license_id)
                approved.append(license_id)

        return WalkResult(approved=approved, status=WalkStatus.DONE)

    def review_modules(
        self,
        unapproved_modules: Sequence[str],
        existing_modules: Sequence[str],
        records: Optional[Mapping[str, ModuleRecord]] = None,
    ) -> WalkResult:
        """Ask about each unapproved module in turn.

        The operator is first asked whether to modify the module list at
        all; answering No ends the walk without further prompts.

        Args:
            unapproved_modules: Module keys in encounter order.
            existing_modules: Module keys already approved; these are not
                offered again.
            records: Optional records used to show each module's license.

        Returns:
            WalkResult with the module keys approved, in answer order.
        """
        offered = set(existing_modules)
        candidates = [key for key in unapproved_modules if key not in offered]
        if not candidates:
            return WalkResult()

        if self._ask(MODIFY_MODULES_QUESTION, CONFIRM_ANSWERS) is not Answer.YES:
            return WalkResult()

        approved: list[str] = []
        for key in candidates:
            if key in offered:
                continue
            offered.add(key)

            record = records.get(key) if records is not None else None
            license_id = record.licenses if record is not None else None
            answer = self._ask(
                f"Module '{key}' ({license_id or 'no license'}) is not approved. "
                f"{MODULE_QUESTION}",
                WALK_ANSWERS,
            )
            if answer is Answer.SAVE_AND_QUIT:
                logger.info("Save and Quit at module %s", key)
                return WalkResult(approved=approved, status=WalkStatus.QUIT)
            if answer is Answer.YES:
                logger.debug("Approved module %s", key)
                approved.append(key)

        return WalkResult(approved=approved, status=WalkStatus.DONE)

    def reconcile(
        self,
        invalid_modules: Optional[Mapping[str, ModuleRecord]],
        config: AllowlistConfig,
        review_modules: bool = False,
    ) -> ReconciliationResult:
        """Run the license walk, then optionally the module walk.

        The module walk only runs if the license walk finished without
        Save and Quit, and only covers modules whose license is still
        unapproved.

        Args:
            invalid_modules: Result of get_invalid_modules.
            config: Current allowlist. It is not modified.
            review_modules: Whether to run the module walk.

        Returns:
            ReconciliationResult with existing entries first and new
            entries appended in the order they were approved.
        """
        license_walk = self.review_licenses(
            get_unapproved_licenses(invalid_modules), config.licenses
        )
        licenses = [*config.licenses, *license_walk.approved]
        modules = list(config.modules)

        if license_walk.quit:
            return ReconciliationResult(
                config=AllowlistConfig(licenses=licenses, modules=modules),
                quit=True,
            )

        quit_walk = False
        if review_modules:
            module_walk = self.review_modules(
                get_unapproved_modules(invalid_modules, licenses, modules),
                modules,
                records=invalid_modules,
            )
            modules.extend(module_walk.approved)
            quit_walk = module_walk.quit

        logger.info(
            "Approved %d licenses and %d modules",
            len(licenses) - len(config.licenses),
            len(modules) - len(config.modules),
        )
        return ReconciliationResult(
            config=AllowlistConfig(licenses=licenses, modules=modules),
            quit=quit_walk,
        )
