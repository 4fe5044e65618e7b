# api/share.py
# Shareable text summary of a split, plus a WhatsApp deep link for it.
from urllib.parse import quote

WHATSAPP_URL = 'https://wa.me/?text='


def format_summary(result, currency_symbol='₹', app_url=None):
    """
    Render a SplitResult as a chat-friendly message.

    Totals and transaction amounts are the engine's own rounded values;
    nothing is recomputed here.
    """
    def money(value):
        return f"{currency_symbol}{value:.2f}"

    lines = ["💰 *Expense Split Summary*", "", "📋 *What everyone paid:*"]

    for balance in result.balances:
        lines.append(f"• {balance.name}: {money(balance.total_paid)}")
        for expense in balance.expenses:
            if expense.description:
                lines.append(f"  - {money(expense.amount_paid)} ({expense.description})")
            else:
                lines.append(f"  - {money(expense.amount_paid)}")

    lines.append("")
    lines.append(f"💸 *Total Expense:* {money(result.total_expense)}")
    lines.append(f"👥 *Per Person Share:* {money(result.per_person_share)}")
    lines.append("")

    if result.transactions:
        lines.append("💳 *Settlement Required:*")
        for t in result.transactions:
            lines.append(f"• {t.from_name} should pay {money(t.amount)} to {t.to_name}")
    else:
        lines.append("✅ All expenses are already balanced!")

    if app_url:
        lines.append("")
        lines.append(f"🔗 Try this expense splitter: {app_url}")

    return '\n'.join(lines) + '\n'


def whatsapp_link(message):
    return WHATSAPP_URL + quote(message, safe='')
