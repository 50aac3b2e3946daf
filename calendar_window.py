"""Month date-picker window (tkinter) drawn from a CalendarLayout."""

import calendar as _cal
from datetime import date
from tkinter import font as tkfont
import tkinter as tk

from calendar_layout import CalendarLayout, DayCell, Navigation
from calendar_logic import day_of_year, iso_week_numbers, weekday_label

# Colours
ACCENT = "#0078D4"
SEL_BG = "#B3D7F2"
HEADER_BG = "#F3F3F3"
GRID_BG = "white"
WN_FG = "#888888"
DISABLED_FG = "#BBBBBB"
WEEKEND_FG = "#CC0000"

MAX_WEEKS = 6


class DatePickerWindow:
    """Single-month picker; acts as the renderer for its layout."""

    def __init__(self, layout: CalendarLayout, colors: dict | None = None,
                 root: tk.Tk | None = None) -> None:
        self.layout = layout
        colors = colors or {}
        self.accent = colors.get("accent", ACCENT)
        self.sel_bg = colors.get("selection", SEL_BG)
        self.disabled_fg = colors.get("disabled", DISABLED_FG)

        self.root = root or tk.Tk()
        self.root.title(self._title())
        self.root.resizable(False, False)
        self.root.configure(bg=GRID_BG)
        self._setup_fonts()

        self._navigation: Navigation | None = None
        self._header_index = 0
        self._cell_index = 0
        # Canvas id -> day, only for active (clickable) cells
        self._widget_dates: dict[int, date] = {}

        self._build_shell()
        self.refresh()

        self.root.bind("<Escape>", self._on_escape)
        self.root.protocol("WM_DELETE_WINDOW", self.hide)

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=9)
        self.font_bold = tkfont.Font(family=base, size=9, weight="bold")
        self.font_header = tkfont.Font(family=base, size=10, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=12, weight="bold")
        self.font_wn = tkfont.Font(family=base, size=8)

    def _title(self) -> str:
        return f"Date Picker  Day: {day_of_year(self.layout.today)}"

    # ------------------------------------------------------------------
    # Build shell (once): title row, weekday header, week rows, footer
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        outer = tk.Frame(self.root, bg=GRID_BG)
        outer.pack(padx=6, pady=4)

        nav = tk.Frame(outer, bg=HEADER_BG)
        nav.pack(fill="x", pady=(0, 2))
        btn_prev = tk.Label(nav, text="◀", font=self.font_nav,
                            bg=HEADER_BG, cursor="hand2")
        btn_prev.pack(side="left", padx=6)
        btn_prev.bind("<Button-1>", lambda _e: self._navigate(-1))
        btn_next = tk.Label(nav, text="▶", font=self.font_nav,
                            bg=HEADER_BG, cursor="hand2")
        btn_next.pack(side="right", padx=6)
        btn_next.bind("<Button-1>", lambda _e: self._navigate(1))
        self.title_label = tk.Label(nav, font=self.font_header, bg=HEADER_BG, fg="#333333")
        self.title_label.pack(side="left", expand=True)

        grid = tk.Frame(outer, bg=GRID_BG)
        grid.pack()
        tk.Label(grid, text="Wk", font=self.font_bold, bg=GRID_BG, fg=WN_FG,
                 width=3).grid(row=0, column=0)

        _tmp = tk.Label(self.root, text="00", font=self.font_normal, width=3)
        _tmp.update_idletasks()
        cell_w, cell_h = _tmp.winfo_reqwidth(), _tmp.winfo_reqheight()
        _tmp.destroy()

        self.day_headers: list[tk.Label] = []
        for col in range(7):
            lbl = tk.Label(grid, font=self.font_bold, bg=GRID_BG, width=3)
            lbl.grid(row=0, column=col + 1)
            self.day_headers.append(lbl)

        self.week_nums: list[tk.Label] = []
        self.day_cells: list[tk.Canvas] = []
        for r in range(MAX_WEEKS):
            wn = tk.Label(grid, font=self.font_wn, bg=GRID_BG, fg=WN_FG, width=3)
            wn.grid(row=r + 1, column=0)
            self.week_nums.append(wn)
            for c in range(7):
                cell = tk.Canvas(grid, width=cell_w, height=cell_h, bg=GRID_BG,
                                 highlightthickness=0, borderwidth=0)
                cell.grid(row=r + 1, column=c + 1)
                cell.bind("<ButtonPress-1>", self._on_press)
                self.day_cells.append(cell)

        self.footer_label = tk.Label(outer, font=self.font_normal,
                                     bg=GRID_BG, fg="#555555")
        self.footer_label.pack(pady=(4, 0))

    # ------------------------------------------------------------------
    # Render pass
    # ------------------------------------------------------------------
    def refresh(self) -> None:
        """Redraw everything from the layout's current state."""
        self._header_index = 0
        self._cell_index = 0
        self._widget_dates.clear()
        self.layout.render(self)

        weeks = iso_week_numbers(self.layout.days())
        for r, wn in enumerate(self.week_nums):
            wn.configure(text=weeks[r] if r < len(weeks) else "")
        for cell in self.day_cells[self._cell_index:]:
            cell.delete("all")
            cell.configure(bg=GRID_BG, cursor="")
        self.footer_label.configure(text=self._footer_text())

    def title(self, month: date, navigation: Navigation) -> None:
        self._navigation = navigation
        self.title_label.configure(text=f"{_cal.month_name[month.month]} {month.year}")

    def header(self, day: date) -> None:
        lbl = self.day_headers[self._header_index]
        weekend = self.layout.calendar.weekday_of(day).is_weekend
        lbl.configure(text=weekday_label(day, self.layout.calendar),
                      fg=WEEKEND_FG if weekend else "#333333")
        self._header_index += 1

    def active_cell(self, cell: DayCell) -> None:
        canvas = self._next_canvas()
        if cell.is_selected:
            bg, fg = self.sel_bg, "black"
        elif self.layout.calendar.weekday_of(cell.day).is_weekend:
            bg, fg = GRID_BG, WEEKEND_FG
        else:
            bg, fg = GRID_BG, "black"
        self._draw_cell(canvas, cell, bg, fg, cursor="hand2")
        self._widget_dates[id(canvas)] = cell.day

    def disabled_cell(self, cell: DayCell) -> None:
        canvas = self._next_canvas()
        bg = self.sel_bg if cell.is_selected else GRID_BG
        self._draw_cell(canvas, cell, bg, self.disabled_fg)

    def _next_canvas(self) -> tk.Canvas:
        canvas = self.day_cells[self._cell_index]
        self._cell_index += 1
        return canvas

    def _draw_cell(self, canvas: tk.Canvas, cell: DayCell, bg: str, fg: str,
                   cursor: str = "") -> None:
        canvas.delete("all")
        canvas.configure(bg=bg, cursor=cursor)
        w = int(canvas["width"])
        h = int(canvas["height"])
        if cell.is_today:
            canvas.create_rectangle(1, 1, w - 1, h - 1, outline=self.accent, width=2)
        font = self.font_bold if cell.is_today else self.font_normal
        canvas.create_text(w // 2, h // 2, text=str(cell.day.day), fill=fg, font=font)

    # ------------------------------------------------------------------
    # Footer text
    # ------------------------------------------------------------------
    def _footer_text(self) -> str:
        today_str = f"Today: {self.layout.today.strftime('%d.%m.%Y')}"
        if not self.layout.is_range_mode:
            picked = self.layout.selected_date
            if picked is None:
                return today_str
            return f"Selected: {picked.strftime('%d.%m.%Y')}     {today_str}"

        state = self.layout.selection
        if state.is_empty:
            return today_str
        if state.is_partial:
            return f"From {state.start.strftime('%d.%m')} → ?     {today_str}"

        total_days = (state.end - state.start).days + 1
        full_weeks, rem_days = divmod(total_days, 7)
        parts: list[str] = []
        if full_weeks:
            parts.append(f"{full_weeks} week{'s' if full_weeks != 1 else ''}")
        if rem_days:
            parts.append(f"{rem_days} day{'s' if rem_days != 1 else ''}")
        range_str = f"{state.start.strftime('%d.%m')} → {state.end.strftime('%d.%m')}"
        return f"{range_str}:  {total_days} days  ({', '.join(parts)})     {today_str}"

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def _on_press(self, event: tk.Event) -> None:
        d = self._widget_dates.get(id(event.widget))
        if d is not None and self.layout.pick(d):
            self.refresh()

    def _navigate(self, direction: int) -> None:
        if self._navigation is None:
            return
        if direction < 0:
            self._navigation.previous()
        else:
            self._navigation.next()
        self.refresh()

    def _on_escape(self, _event: tk.Event) -> None:
        """ESC clears a range selection first, then hides."""
        state = self.layout.selection
        if state is not None and not state.is_empty:
            self.clear_selection()
        else:
            self.hide()

    def clear_selection(self) -> None:
        self.layout.clear_selection()
        self.refresh()

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self.refresh()
        self.root.deiconify()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        self.root.withdraw()
