import logging
import os

from PIL import Image, ImageDraw, ImageFont

from formatting import format_rupiah, format_weight

LOGGER = logging.getLogger(__name__)

STORE_NAME = "Toko Bangunan Material"


def _text_size(draw_obj, text, font):
    bbox = draw_obj.textbbox((0, 0), text, font=font)
    return (bbox[2] - bbox[0], bbox[3] - bbox[1])


def _wrap_text(draw_obj, text, font, max_w):
    # wrap on words so long product names stay inside the item column
    words = (text or '').split()
    if not words:
        return ['']
    lines = []
    cur = words[0]
    for w in words[1:]:
        tw, _ = _text_size(draw_obj, cur + ' ' + w, font)
        if tw <= max_w:
            cur = cur + ' ' + w
        else:
            lines.append(cur)
            cur = w
    lines.append(cur)
    return lines


class ReceiptGenerator:
    @staticmethod
    def _load_font(size):
        # Try common system fonts, fallback to default
        for f in ["DejaVuSans.ttf", "arial.ttf", "LiberationSans-Regular.ttf"]:
            try:
                return ImageFont.truetype(f, size)
            except OSError:
                continue
        return ImageFont.load_default()

    @staticmethod
    def generate(result, directory):
        """Render a PNG receipt for a CheckoutResult into `directory` and return its path."""
        os.makedirs(directory, exist_ok=True)
        receipt_id = result.transactions[0].id if result.transactions else 'empty'
        png_path = os.path.join(directory, f"{receipt_id}.png")

        width = 640
        x = 30
        line_h = 24
        f_head = ReceiptGenerator._load_font(24)
        f_body = ReceiptGenerator._load_font(14)
        f_mono = ReceiptGenerator._load_font(12)

        right = width - x
        col_total_right = right
        col_qty_center = right - 190
        item_col_w = max(80, col_qty_center - x - 40)

        # measure wrapped names first so the image height fits every line
        tmp_draw = ImageDraw.Draw(Image.new('RGB', (1, 1)))
        prepared = []
        for trx in result.transactions:
            lines = _wrap_text(tmp_draw, trx.product_name, f_mono, item_col_w)
            prepared.append((lines, str(trx.quantity), format_rupiah(trx.total_price)))
        items_h = sum(len(lines) * line_h + 6 for lines, _, _ in prepared)
        height = 150 + items_h + line_h * 4 + 60

        img = Image.new('RGB', (width, height), color=(255, 255, 255))
        draw = ImageDraw.Draw(img)

        y = 20
        draw.text((x, y), STORE_NAME, font=f_head, fill=(20, 20, 20))
        y += 36
        draw.text((x, y), f"No: {receipt_id}", font=f_body, fill=(0, 0, 0))
        y += 20
        draw.text((x, y), f"Date: {result.timestamp.strftime('%Y-%m-%d %H:%M:%S')}", font=f_body, fill=(0, 0, 0))
        y += 28
        draw.line((x, y, right, y), fill=(200, 200, 200), width=1)
        y += 10

        draw.text((x, y), "Item", font=f_mono, fill=(0, 0, 0))
        tw, _ = _text_size(draw, "Qty", f_mono)
        draw.text((col_qty_center - tw / 2, y), "Qty", font=f_mono, fill=(0, 0, 0))
        tw, _ = _text_size(draw, "Total", f_mono)
        draw.text((col_total_right - tw, y), "Total", font=f_mono, fill=(0, 0, 0))
        y += 20

        for lines, qty, total in prepared:
            for i, ln in enumerate(lines):
                draw.text((x, y), ln, font=f_mono, fill=(20, 20, 20))
                if i == 0:
                    qw, _ = _text_size(draw, qty, f_mono)
                    draw.text((col_qty_center - qw / 2, y), qty, font=f_mono, fill=(20, 20, 20))
                    tw, _ = _text_size(draw, total, f_mono)
                    draw.text((col_total_right - tw, y), total, font=f_mono, fill=(20, 20, 20))
                y += line_h
            draw.line((x, y, right, y), fill=(245, 245, 245), width=1)
            y += 6

        y += 8
        summary = [
            (f"Subtotal ({result.count} item): {format_rupiah(result.subtotal)}", (0, 0, 0)),
            (f"Shipping ({format_weight(result.weight)}): {format_rupiah(result.shipping)}", (0, 0, 0)),
            (f"Total: {format_rupiah(result.total)}", (0, 100, 0)),
        ]
        for txt, colour in summary:
            tw, _ = _text_size(draw, txt, f_body)
            draw.text((right - tw, y), txt, font=f_body, fill=colour)
            y += line_h

        draw.text((x, y + 10), "Thank you for your purchase!", font=f_body, fill=(80, 80, 80))

        img.save(png_path)
        LOGGER.info("Receipt written to %s", png_path)
        return png_path
