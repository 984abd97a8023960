from __future__ import annotations

STYLE_BG = "bg-slate-50 text-slate-900 min-h-screen"
STYLE_CONTAINER = "w-full max-w-xl mx-auto px-6 py-6 gap-6"

STYLE_CARD = "bg-white border border-slate-200 shadow-sm rounded-xl"

STYLE_PAGE_TITLE = "text-2xl font-bold tracking-tight text-slate-900"
STYLE_TEXT_SUBTLE = "text-sm text-slate-500"

STYLE_BTN_GHOST = (
    "text-slate-600 hover:text-slate-900 hover:bg-slate-100 active:scale-[0.99] rounded-md px-3 py-2 text-sm "
    "font-semibold transition-all focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-slate-400/30"
)
STYLE_INPUT = "w-full text-sm"

STYLE_ROW = "w-full items-center justify-between border-b border-slate-100 py-2"
STYLE_LABEL = "text-sm text-slate-700"
STYLE_LABEL_COMPLETED = "text-sm text-slate-400 line-through"
STYLE_FILTER_LINK = "text-sm text-slate-600 px-2 py-1 rounded-md no-underline"
STYLE_FILTER_LINK_SELECTED = "text-sm text-slate-900 px-2 py-1 rounded-md border border-amber-400 no-underline"

C_BG = STYLE_BG
C_CONTAINER = STYLE_CONTAINER
C_CARD = STYLE_CARD
C_PAGE_TITLE = STYLE_PAGE_TITLE
C_TEXT_SUBTLE = STYLE_TEXT_SUBTLE
C_BTN_GHOST = STYLE_BTN_GHOST
C_INPUT = STYLE_INPUT
C_ROW = STYLE_ROW
C_LABEL = STYLE_LABEL
C_LABEL_COMPLETED = STYLE_LABEL_COMPLETED
C_FILTER_LINK = STYLE_FILTER_LINK
C_FILTER_LINK_SELECTED = STYLE_FILTER_LINK_SELECTED
