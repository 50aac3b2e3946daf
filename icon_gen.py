"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

ACCENT = "#0078D4"


def create_icon_image(day: date | None = None, size: int = 64) -> Image.Image:
    """Return a square RGBA calendar leaf showing the day of the month.

    A blue band across the top marks it as a calendar; the number fills
    the white area below.
    """
    day = day or date.today()
    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)
    band = size // 5
    draw.rectangle((0, 0, size - 1, band), fill=ACCENT)
    draw.rectangle((0, 0, size - 1, size - 1), outline=ACCENT)

    text = str(day.day)
    avail_h = size - band - 4

    # Largest font size that fits below the band
    font_size = size
    font = None
    while font_size > 8:
        try:
            font = ImageFont.truetype("DejaVuSans-Bold.ttf", font_size)
        except OSError:
            font = ImageFont.load_default()
            break
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= size - 4 and bbox[3] - bbox[1] <= avail_h:
            break
        font_size -= 1

    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = band + (size - band - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)
    return img
