# api/settlement.py
import logging
from decimal import ROUND_HALF_UP, Decimal

logger = logging.getLogger(__name__)

# Balances closer to zero than this count as settled
EPSILON = 0.01


def round2(value):
    """Round to cents, halves away from zero."""
    rounded = float(Decimal(str(value)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP))
    # no "-0.0" in the output
    return rounded or 0.0


class ExpenseRecord:
    def __init__(self, amount_paid, description=''):
        self.amount_paid = float(amount_paid)
        self.description = description or ''

    def to_dict(self):
        return {'amountPaid': self.amount_paid, 'description': self.description}

    def __eq__(self, other):
        if not isinstance(other, ExpenseRecord):
            return NotImplemented
        return (self.amount_paid, self.description) == (other.amount_paid, other.description)

    def __repr__(self):
        return f"ExpenseRecord({self.amount_paid!r}, {self.description!r})"


class Participant:
    def __init__(self, name, expenses):
        self.name = name
        self.expenses = list(expenses)

    @classmethod
    def from_amount(cls, name, amount, description=''):
        # A flat amount is just a one-record expense list
        return cls(name, [ExpenseRecord(amount, description)])

    @property
    def total_paid(self):
        return sum(expense.amount_paid for expense in self.expenses)

    def to_dict(self):
        return {'name': self.name, 'expenses': [e.to_dict() for e in self.expenses]}


class Balance:
    def __init__(self, name, total_paid, expenses, balance):
        self.name = name
        self.total_paid = total_paid
        self.expenses = expenses
        self.balance = balance

    def to_dict(self):
        return {
            'name': self.name,
            'totalPaid': self.total_paid,
            'expenses': [e.to_dict() for e in self.expenses],
            'balance': self.balance,
        }


class Transaction:
    def __init__(self, from_name, to_name, amount):
        self.from_name = from_name
        self.to_name = to_name
        self.amount = amount

    def to_dict(self):
        return {'from': self.from_name, 'to': self.to_name, 'amount': self.amount}

    def __eq__(self, other):
        if not isinstance(other, Transaction):
            return NotImplemented
        return (self.from_name, self.to_name, self.amount) == (other.from_name, other.to_name, other.amount)

    def __repr__(self):
        return f"Transaction({self.from_name!r} -> {self.to_name!r}, {self.amount!r})"


class SplitResult:
    def __init__(self, balances, total_expense, per_person_share, transactions):
        self.balances = balances
        self.total_expense = total_expense
        self.per_person_share = per_person_share
        self.transactions = transactions

    def to_dict(self):
        return {
            'balances': [b.to_dict() for b in self.balances],
            'totalExpense': self.total_expense,
            'perPersonShare': self.per_person_share,
            'transactions': [t.to_dict() for t in self.transactions],
        }


def settle(debtors, creditors):
    """
    Greedily match debtors against creditors, both taken in the order given.

    ``debtors`` holds ``(name, balance)`` pairs with negative balances and
    ``creditors`` pairs with positive ones. The inputs are not modified.
    """
    debtors = [[name, amount] for name, amount in debtors]
    creditors = [[name, amount] for name, amount in creditors]

    transactions = []
    i = 0
    j = 0

    while i < len(debtors) and j < len(creditors):
        debtor = debtors[i]
        creditor = creditors[j]

        amount = min(abs(debtor[1]), creditor[1])
        transactions.append(Transaction(debtor[0], creditor[0], round2(amount)))

        debtor[1] += amount
        creditor[1] -= amount

        if abs(debtor[1]) < EPSILON: i += 1
        if abs(creditor[1]) < EPSILON: j += 1

    return transactions


def compute_split(participants):
    """
    Split the group's spending equally and work out who pays whom.

    ``participants`` must be non-empty; an empty list divides by zero.
    """
    # 1. Totals per participant and overall
    paid = [(p, p.total_paid) for p in participants]
    total_expense = sum(total for _, total in paid)
    per_person_share = total_expense / len(participants)

    # 2. Net balances, unrounded until the end
    raw = [(p.name, total - per_person_share) for p, total in paid]

    # 3. Separate debtors and creditors, keeping entry order
    debtors = [(name, amount) for name, amount in raw if amount <= -EPSILON]
    creditors = [(name, amount) for name, amount in raw if amount >= EPSILON]

    # 4. Match them up
    transactions = settle(debtors, creditors)

    balances = [
        Balance(p.name, round2(total), list(p.expenses), round2(total - per_person_share))
        for p, total in paid
    ]

    logger.debug(
        "Split %.2f across %d participants: %d debtors, %d creditors, %d transactions",
        total_expense, len(participants), len(debtors), len(creditors), len(transactions),
    )

    return SplitResult(balances, round2(total_expense), round2(per_person_share), transactions)
