# Design tokens for Bubble Timer UI

COLORS = {
    'background_top': '#2B0066',
    'background_bottom': '#003366',
    'text': '#FFFFFF',
    'text_muted': '#C9D3FF',
    'minute_bubble': '#FF4DD2',
    'second_bubble': '#00E5FF',
    'preset_bubble': '#A8FF00',
    'start_bubble': '#FF7200',
    'selected_ring': '#FFFFFF',
    'error': '#FF5A5A',
    'clear_button_bg': 'rgba(255, 255, 255, 0.25)',
    # countdown bubble bands by fraction of time left
    'countdown_high': '#FF4DD2',
    'countdown_mid': '#FFB300',
    'countdown_low': '#FF0000',
}

# history bubble colour per session status tag
STATUS_COLORS = {
    'finished': '#FF4DD2',
    'cancelled': '#808080',
    'active': '#00E5FF',
    'paused': '#00E5FF',
}

FONTS = {
    'family': 'Inter, Manrope, Arial, sans-serif',
    'countdown_size': 56,
    'countdown_weight': 'bold',
    'bubble_size': 16,
    'title_size': 28,
    'text': 16,
}

BUBBLE_SIZES = {
    'picker': 56,
    'preset': 50,
    'start': 80,
    'countdown': 240,
}


def countdown_color(progress):
    """Pick the countdown bubble colour from the fraction of time left."""
    if progress > 0.5:
        return COLORS['countdown_high']
    if progress > 0.2:
        return COLORS['countdown_mid']
    return COLORS['countdown_low']
