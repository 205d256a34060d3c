"""Pane state and text: search bar, search list, manga details, chapter list, editor."""