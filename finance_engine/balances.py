from typing import Final, Iterable

from finance_engine.domain import Account, AccountShare, BalanceSummary

# Credit utilization above this fraction triggers the near-limit warning.
NEAR_LIMIT_THRESHOLD: Final[float] = 0.8


def total_balance(accounts: Iterable[Account]) -> float:
    return sum((a.balance for a in accounts), 0.0)


def has_credit_limit(account: Account) -> bool:
    return account.credit_limit is not None and account.credit_limit > 0


def account_share(account: Account, total: float) -> AccountShare:
    if has_credit_limit(account):
        utilization = account.balance / account.credit_limit
        return AccountShare(
            account=account,
            share_of_total=None,
            credit_utilization=utilization,
            near_limit=utilization > NEAR_LIMIT_THRESHOLD,
        )

    share = account.balance / total if total != 0 else 0.0
    return AccountShare(account=account, share_of_total=share)


def summarize_balances(accounts: Iterable[Account]) -> BalanceSummary:
    """Signed total of all balances plus each account's share or credit utilization."""
    accounts = tuple(accounts)
    total = total_balance(accounts)
    return BalanceSummary(
        total=total,
        per_account=tuple(account_share(a, total) for a in accounts),
    )


def near_limit_accounts(summary: BalanceSummary) -> tuple[Account, ...]:
    return tuple(s.account for s in summary.per_account if s.near_limit)
