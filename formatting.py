from config import CURRENCY_PREFIX, WEEKDAY_LABELS


def format_rupiah(amount):
    """65000 -> 'Rp 65.000'. Negative amounts keep their sign: 'Rp -455.000'."""
    grouped = f"{int(round(amount)):,}".replace(",", ".")
    return f"{CURRENCY_PREFIX} {grouped}"


def format_signed_rupiah(amount):
    # ledger style: '+Rp 195.000' for sales, '-Rp 455.000' for restock cost
    sign = "+" if amount >= 0 else "-"
    return sign + format_rupiah(abs(amount))


def format_weight(kg):
    return f"{kg:.1f} kg"


def weekday_label(day):
    return WEEKDAY_LABELS[day.weekday()]
