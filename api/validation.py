# api/validation.py
# Checks the settlement engine leaves to its callers: turning request JSON
# into participants and rejecting groups that cannot be split.
import math

from settlement import ExpenseRecord, Participant


class ValidationError(ValueError):
    def __init__(self, errors):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__(', '.join(self.errors))


def _amount(value, label):
    if isinstance(value, bool):
        raise ValidationError(f"Amount for {label} must be a number")
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Amount for {label} must be a number")
    # float() happily accepts "NaN" and "Infinity"
    if not math.isfinite(amount):
        raise ValidationError(f"Amount for {label} must be a number")
    return amount


def parse_participants(payload):
    """
    Build Participant objects from a request body.

    Accepts a bare list of participants or ``{"participants": [...]}``.
    Each participant carries either an ``expenses`` list of
    ``{"amountPaid", "description"}`` records or a single flat
    ``amountPaid`` (or ``amount``).
    """
    if isinstance(payload, dict):
        payload = payload.get('participants')
    if not isinstance(payload, list):
        raise ValidationError("Request body must be a list of participants")

    participants = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise ValidationError(f"Person {index + 1} must be an object")

        name = item.get('name') or ''
        if not isinstance(name, str):
            name = str(name)
        label = name.strip() or f"Person {index + 1}"

        if 'expenses' in item:
            raw_expenses = item['expenses']
            if not isinstance(raw_expenses, list):
                raise ValidationError(f"Expenses for {label} must be a list")
        else:
            amount = item.get('amountPaid', item.get('amount', 0))
            raw_expenses = [{'amountPaid': amount, 'description': item.get('description', '')}]

        expenses = []
        for expense_index, raw in enumerate(raw_expenses):
            if not isinstance(raw, dict):
                raise ValidationError(f"Expense {expense_index + 1} for {label} must be an object")
            amount = _amount(raw.get('amountPaid', raw.get('amount', 0)),
                             f"{label} expense {expense_index + 1}")
            expenses.append(ExpenseRecord(amount, raw.get('description') or ''))

        participants.append(Participant(name, expenses))

    return participants


def validate_participants(participants, max_participants=20):
    """Raise ValidationError listing every problem with the group, if any."""
    errors = []

    if len(participants) < 2:
        errors.append('At least 2 people are required')
    if len(participants) > max_participants:
        errors.append(f'At most {max_participants} people are allowed')

    for index, person in enumerate(participants):
        label = person.name.strip() or f'Person {index + 1}'

        if not person.name.strip():
            errors.append(f'Person {index + 1} name is required')

        if not any(expense.amount_paid > 0 for expense in person.expenses):
            errors.append(f'{label} must have at least one expense with amount greater than 0')

        for expense_index, expense in enumerate(person.expenses):
            if expense.amount_paid < 0:
                errors.append(f'Amount for {label} expense {expense_index + 1} cannot be negative')

    total = sum(person.total_paid for person in participants)
    if not total > 0:
        errors.append('Total expense must be greater than 0')

    if errors:
        raise ValidationError(errors)


def drop_empty_expenses(participants):
    """Return copies of the participants without zero-amount records."""
    return [
        Participant(p.name.strip(), [e for e in p.expenses if e.amount_paid != 0])
        for p in participants
    ]
