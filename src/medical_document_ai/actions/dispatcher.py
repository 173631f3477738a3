# ============================================================================
# src/medical_document_ai/actions/dispatcher.py
# ============================================================================
"""
Action Dispatcher

Executes reviewer-confirmed suggested actions against the integrating
system's record-creation handlers, one handler per ActionKind.

- Handlers are registered by the caller; the core ships none
- Actions run in the given order
- A failing handler is recorded in its ImportResult and does not stop
  the remaining actions
- An action with no registered handler is a caller error: nothing runs
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from ..constants import ActionKind
from ..core.models import RawDocument, SuggestedAction
from ..utils.exceptions import ActionDispatchError

logger = logging.getLogger(__name__)

ActionHandler = Callable[[SuggestedAction, RawDocument], Any]


@dataclass(frozen=True)
class ImportResult:
    action: ActionKind
    success: bool
    result: Any = None
    error: Optional[str] = None


class ActionDispatcher:
    """
    Usage:
        dispatcher = ActionDispatcher()
        dispatcher.register(ActionKind.CREATE_PRESCRIPTION, create_prescription)
        results = dispatcher.dispatch(result.suggested_actions, document)
    """

    def __init__(self, handlers: Optional[Dict[ActionKind, ActionHandler]] = None):
        self._handlers: Dict[ActionKind, ActionHandler] = dict(handlers or {})

    def register(self, kind: ActionKind, handler: ActionHandler) -> None:
        self._handlers[kind] = handler

    def has_handler(self, kind: ActionKind) -> bool:
        return kind in self._handlers

    def dispatch(
        self,
        actions: Iterable[SuggestedAction],
        document: RawDocument,
    ) -> List[ImportResult]:
        """
        Run every action's handler in order.

        Raises:
            ActionDispatchError: an action has no registered handler
        """
        actions = list(actions)
        for action in actions:
            if action.action not in self._handlers:
                raise ActionDispatchError(
                    f"No handler registered for {action.action.name}",
                    action=action.action.name
                )

        results = []
        for action in actions:
            handler = self._handlers[action.action]
            try:
                outcome = handler(action, document)
                results.append(ImportResult(action=action.action, success=True, result=outcome))
            except Exception as e:
                logger.error(f"{action.action.name} failed for document {document.id}: {e}")
                results.append(ImportResult(action=action.action, success=False, error=str(e)))

        succeeded = sum(1 for r in results if r.success)
        logger.info(f"Dispatched {len(results)} actions for document {document.id}: {succeeded} succeeded")
        return results
