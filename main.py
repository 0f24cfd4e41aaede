import argparse
import logging
import os
import random
import sys

from config import LOG_FORMAT
from controller import StoreController
from datavisualization import render_dashboard
from formatting import format_rupiah, format_signed_rupiah, format_weight
from inserting import seed
from products import stock_status
from receipt import ReceiptGenerator

LOGGER = logging.getLogger(__name__)


def _parse_line(value):
    # "P001:3" -> ("P001", 3), "P001" -> ("P001", 1)
    pid, _, qty = value.partition(':')
    try:
        return pid, int(qty) if qty else 1
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid cart line: {value}")


def _print_notify(title, message):
    print(f"{title}: {message}", file=sys.stderr)


def print_inventory(products):
    print(f"{'ID':<6} {'Name':<30} {'Category':<9} {'Price':>14} {'Stock':>8} {'Status'}")
    print('-' * 84)
    for p in products:
        print(f"{p.id:<6} {p.name:<30} {p.category.value:<9} {format_rupiah(p.price):>14} "
              f"{p.stock:>5} {p.unit:<3} {stock_status(p)}{' (cargo)' if p.is_cargo else ''}")


def print_dashboard(dash):
    print(f"Revenue today:      {format_rupiah(dash.revenue_today)}")
    print(f"Transactions today: {dash.transactions_today}")
    print(f"Low stock products: {dash.low_stock_count}")
    print()
    print("Last 7 days:")
    for d in dash.daily:
        print(f"  {d.label:<4} {d.day.isoformat()} {format_rupiah(d.revenue):>16}")
    print("Per month:")
    for m in dash.monthly:
        print(f"  {m.month} {format_rupiah(m.revenue):>18}")
    print("Recent mutations:")
    for t in dash.recent:
        kind = 'RESTOCK' if t.is_restock else 'SOLD'
        print(f"  {t.timestamp.strftime('%Y-%m-%d %H:%M')} {kind:<8} {t.product_name:<30} "
              f"x{t.quantity:<4} {format_signed_rupiah(t.total_price)}")


def build_parser():
    parser = argparse.ArgumentParser(description='Material store session driver')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for the synthetic history')
    parser.add_argument('--no-history', action='store_true', help='Start with an empty ledger')
    parser.add_argument('--buy', type=_parse_line, action='append', default=[], metavar='PID[:QTY]',
                        help='Add a product to the cart (repeatable), then check out')
    parser.add_argument('--restock', nargs=2, action='append', default=[], metavar=('PID', 'AMOUNT'),
                        help='Restock a product (admin, repeatable)')
    parser.add_argument('--password', help='Admin password, required for restock and dashboard')
    parser.add_argument('--charts', metavar='PATH', help='Write the dashboard charts to a PNG file')
    parser.add_argument('--receipt-dir', metavar='DIR', help='Write a PNG receipt after checkout')
    return parser


def main(argv=None):
    logging.basicConfig(level=os.environ.get("MATERIAL_STORE_LOG_LEVEL", "INFO"), format=LOG_FORMAT)
    args = build_parser().parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None
    ctl = StoreController(db=seed(rng=rng, with_history=not args.no_history), notify=_print_notify)

    for pid, qty in args.buy:
        for _ in range(qty):
            if not ctl.add_to_cart(pid):
                break

    if len(ctl.cart):
        totals = ctl.cart_totals()
        print(f"Cart: {totals['count']} item(s), {format_weight(totals['weight'])}, "
              f"subtotal {format_rupiah(totals['subtotal'])}, "
              f"shipping {format_rupiah(totals['shipping'])}, total {format_rupiah(totals['total'])}")
        result = ctl.checkout()
        if result and args.receipt_dir:
            print(f"Receipt: {ReceiptGenerator.generate(result, args.receipt_dir)}")

    if args.password is not None:
        ctl.login(args.password)

    for pid, amount in args.restock:
        try:
            amount = int(amount)
        except ValueError:
            LOGGER.warning("Restock amount %r is not a number", amount)
            continue
        ctl.restock(pid, amount)

    print_inventory(ctl.products.get_all_products())
    if ctl.is_admin:
        print()
        dash = ctl.dashboard()
        print_dashboard(dash)
        if args.charts:
            render_dashboard(dash, args.charts)
    return 0


if __name__ == "__main__":
    sys.exit(main())
