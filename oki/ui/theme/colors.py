# Warm, earthy palettes. "window" is the page background behind the navigation stack, slightly off from "background".
THEMES = {
    "Light": {
        "background": "#FAF8F2",
        "window": "#FAFAFA",
        "text": "#61311A",
        "text_muted": "rgba(97, 49, 26, 0.7)",
        "text_faint": "rgba(97, 49, 26, 0.4)",
        "border": "rgba(97, 49, 26, 0.2)",
        "accent": "#DE702E",
        "accent_soft": "rgba(222, 112, 46, 0.15)",
        "breathing": "#1FDE702E",  # accent at 12% alpha, #AARRGGBB for QColor
        "on_accent": "#FFFFFF",
    },
    "Dark": {
        "background": "#1E140F",
        "window": "#1E1410",
        "text": "#F5B87A",
        "text_muted": "rgba(245, 184, 122, 0.7)",
        "text_faint": "rgba(245, 184, 122, 0.4)",
        "border": "rgba(245, 184, 122, 0.2)",
        "accent": "#F29443",
        "accent_soft": "rgba(242, 148, 67, 0.15)",
        "breathing": "#1FF29443",
        "on_accent": "#FFFFFF",
    },
}

def theme_for(light_mode):
    return THEMES["Light" if light_mode else "Dark"]
