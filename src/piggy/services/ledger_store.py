"""
LedgerStore - the allowance ledger and reward-funding engine.

Owns the allowance, the transaction list, the reward goals and the
last-reset timestamp. The balance is never stored: it is derived from the
allowance and the transactions on every read.

Every mutation runs under one re-entrant lock, then hands a snapshot to the
injected LedgerRepository. A failed save is logged and ignored; the in-memory
state remains the source of truth for the rest of the process.

NO IMPORTS FROM:
- rich (console, table, prompt)
- typer

Business-rule failures are returned as data (DepositOutcome), never raised.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Iterable, List, Optional

from piggy.model.ledger import (
    LedgerState,
    RewardGoal,
    Transaction,
    TransactionCategory,
    TransactionKind,
    sort_by_priority,
)
from piggy.storage.key_value_store import InMemoryKeyValueStore
from piggy.storage.ledger_repository import LedgerRepository, PersistenceError

logger = logging.getLogger(__name__)

Listener = Callable[[LedgerState], None]

DEPOSIT_REASON_PREFIX = "Deposited Reward: "


def _as_decimal(value: Any) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


@dataclass(frozen=True)
class DepositOutcome:
    """Result of moving funds from the balance into a reward goal."""

    success: bool
    message: str


class LedgerStore:
    """
    Single owner of ledger state.

    Responsibilities:
    - Derive the current balance (allowance + income - expenses)
    - Apply transaction and reward mutations
    - Fund reward goals from the balance as one atomic step
    - Persist a snapshot after each mutation through the repository
    - Notify subscribers with the new snapshot

    Does NOT:
    - Validate amounts or text for add_transaction / add_reward (callers do)
    - Display anything or prompt for input
    """

    def __init__(
        self,
        repository: Optional[LedgerRepository] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Load state from the repository and run the period rollover check.

        Args:
            repository: Persistence strategy (default: in-memory, non-durable)
            clock: Source of "now"; injectable for tests
        """
        self._lock = threading.RLock()
        self._repository = repository or LedgerRepository(InMemoryKeyValueStore())
        self._clock = clock
        self._listeners: List[Listener] = []

        state = self._repository.load(clock=clock)
        self._allowance: Decimal = state.allowance
        self._transactions: List[Transaction] = list(state.transactions)
        self._rewards: List[RewardGoal] = sort_by_priority(state.rewards)
        self._last_reset_date: datetime = state.last_reset_date
        logger.debug(
            "Loaded ledger: %d transactions, %d rewards",
            len(self._transactions),
            len(self._rewards),
        )

        self.check_and_reset()

    # ------------------------------
    # Queries
    # ------------------------------

    def current_balance(self) -> Decimal:
        with self._lock:
            return self._snapshot().current_balance

    def projected_savings(self) -> Decimal:
        """Balance floored at zero."""
        return max(self.current_balance(), Decimal("0"))

    @property
    def allowance(self) -> Decimal:
        with self._lock:
            return self._allowance

    @property
    def last_reset_date(self) -> datetime:
        with self._lock:
            return self._last_reset_date

    @property
    def transactions(self) -> List[Transaction]:
        with self._lock:
            return list(self._transactions)

    @property
    def rewards(self) -> List[RewardGoal]:
        """Reward goals in ascending priority order (copies)."""
        with self._lock:
            return [r.model_copy() for r in self._rewards]

    def get_reward(self, reward_id: str) -> Optional[RewardGoal]:
        with self._lock:
            reward = self._find_reward(reward_id)
            return reward.model_copy() if reward is not None else None

    def snapshot(self) -> LedgerState:
        with self._lock:
            return self._snapshot()

    def reward_ids_at(self, positions: Iterable[int]) -> List[str]:
        """Map positions in the priority-sorted reward view to reward ids.

        Positions outside the view are ignored.
        """
        with self._lock:
            ids: List[str] = []
            for pos in positions:
                if 0 <= pos < len(self._rewards):
                    reward_id = self._rewards[pos].id
                    if reward_id not in ids:
                        ids.append(reward_id)
            return ids

    # ------------------------------
    # Mutations
    # ------------------------------

    def add_transaction(
        self,
        amount: Any,
        reason: str,
        kind: TransactionKind,
        category: TransactionCategory = TransactionCategory.misc,
        date: Optional[datetime] = None,
    ) -> Transaction:
        """Record a transaction. Inputs are taken as given."""
        fields = {"amount": _as_decimal(amount), "reason": reason, "kind": kind, "category": category}
        if date is not None:
            fields["date"] = date
        transaction = Transaction(**fields)
        with self._lock:
            self._transactions.append(transaction)
            self._commit()
        return transaction

    def add_reward(self, title: str, goal_amount: Any) -> RewardGoal:
        """Create a goal ranked after every existing one."""
        with self._lock:
            priority = max((r.priority for r in self._rewards), default=0) + 1
            reward = RewardGoal(title=title, goal_amount=_as_decimal(goal_amount), priority=priority)
            self._rewards.append(reward)
            self._rewards = sort_by_priority(self._rewards)
            self._commit()
            return reward.model_copy()

    def update_reward_progress(self, reward_id: str, delta: Any) -> None:
        """Add delta to a goal's progress. Unknown ids are ignored."""
        with self._lock:
            if self._apply_progress(reward_id, _as_decimal(delta)):
                self._commit()

    def deposit_to_reward(self, reward_id: str, amount: Any) -> DepositOutcome:
        """
        Move funds from the current balance into a reward goal.

        Records an expense (category Reward Deposit) and credits the goal's
        progress in the same critical section, then saves once.

        Returns:
            DepositOutcome; on failure the ledger is untouched
        """
        try:
            amount = _as_decimal(amount)
        except (InvalidOperation, ValueError):
            return DepositOutcome(False, "Deposit amount must be positive.")
        with self._lock:
            if not amount.is_finite() or amount <= 0:
                return DepositOutcome(False, "Deposit amount must be positive.")

            balance = self._snapshot().current_balance
            if amount > balance:
                return DepositOutcome(
                    False,
                    f"Insufficient funds. Your current balance is ${balance:.2f}. "
                    f"You tried to deposit ${amount:.2f}.",
                )

            reward = self._find_reward(reward_id)
            if reward is None:
                return DepositOutcome(False, "Selected reward not found.")

            self._transactions.append(
                Transaction(
                    amount=amount,
                    reason=f"{DEPOSIT_REASON_PREFIX}{reward.title}",
                    kind=TransactionKind.expense,
                    category=TransactionCategory.reward_deposit,
                )
            )
            self._apply_progress(reward_id, amount)
            self._commit()

            new_balance = self._snapshot().current_balance
            logger.info("Deposited %s to reward %s", amount, reward_id)
            return DepositOutcome(
                True,
                f"Successfully deposited ${amount:.2f} to {reward.title}. "
                f"Your new balance is ${new_balance:.2f}.",
            )

    def delete_transaction(self, transaction_id: str) -> None:
        with self._lock:
            self._transactions = [t for t in self._transactions if t.id != transaction_id]
            self._commit()

    def delete_rewards(self, reward_ids: Iterable[str]) -> None:
        """Remove goals by identity. Unknown ids are ignored."""
        doomed = set(reward_ids)
        with self._lock:
            self._rewards = [r for r in self._rewards if r.id not in doomed]
            self._commit()

    def clear_all_transactions(self) -> None:
        with self._lock:
            self._transactions = []
            self._commit()

    def set_allowance(self, amount: Any) -> None:
        with self._lock:
            self._allowance = _as_decimal(amount)
            self._commit()

    def check_and_reset(self) -> bool:
        """Monthly rollover hook.

        On the first day of a month, if the last check was on a different
        day, stamp last_reset_date with now and save. Allowance and
        transactions are left as they are.

        Returns:
            True if the rollover fired
        """
        with self._lock:
            now = self._clock()
            if now.date() != self._last_reset_date.date() and now.day == 1:
                self._last_reset_date = now
                self._commit()
                logger.info("Allowance period rolled over at %s", now.isoformat())
                return True
            return False

    def save(self) -> bool:
        """Persist the current state without changing it.

        Returns:
            True if the repository accepted the snapshot
        """
        with self._lock:
            try:
                self._repository.save(self._snapshot())
            except PersistenceError as e:
                logger.warning("Ledger save failed: %s", e)
                return False
            return True

    # ------------------------------
    # Notification
    # ------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener with a fresh snapshot after every mutation.

        Returns:
            A function that removes the listener
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------
    # Internals
    # ------------------------------

    def _snapshot(self) -> LedgerState:
        return LedgerState(
            allowance=self._allowance,
            transactions=list(self._transactions),
            rewards=[r.model_copy() for r in self._rewards],
            last_reset_date=self._last_reset_date,
        )

    def _find_reward(self, reward_id: str) -> Optional[RewardGoal]:
        return next((r for r in self._rewards if r.id == reward_id), None)

    def _apply_progress(self, reward_id: str, delta: Decimal) -> bool:
        for i, reward in enumerate(self._rewards):
            if reward.id == reward_id:
                self._rewards[i] = reward.model_copy(
                    update={"progress_amount": reward.progress_amount + delta}
                )
                return True
        return False

    def _commit(self) -> None:
        snapshot = self._snapshot()
        try:
            self._repository.save(snapshot)
        except PersistenceError as e:
            logger.warning("Ledger change kept in memory only: %s", e)
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Ledger listener %r failed", listener)


__all__ = ["LedgerStore", "DepositOutcome", "DEPOSIT_REASON_PREFIX"]
