"""Qt stylesheet generation from a theme dict."""


def build_stylesheet(t):
    """Build the application-wide stylesheet for theme dict ``t``."""
    return f"""
        QMainWindow, QDialog, QWidget#page {{
            background-color: {t['window']};
        }}
        QLabel {{
            color: {t['text']};
        }}
        QLabel#sectionTitle {{
            font-size: 22pt;
            font-weight: 600;
        }}
        QLabel#wheelLabel, QLabel#hint {{
            color: {t['text_muted']};
        }}
        QLabel#countdown {{
            font-size: 64pt;
            font-weight: bold;
        }}
        QPushButton#roundAction {{
            background-color: {t['accent']};
            color: {t['on_accent']};
            border: none;
            border-radius: 40px;
            font-size: 26pt;
        }}
        QPushButton#iconButton, QPushButton#textButton {{
            background: transparent;
            border: none;
            color: {t['accent']};
            font-size: 16pt;
        }}
        QPushButton#bellOption {{
            background: transparent;
            color: {t['text_muted']};
            border: 2px solid {t['border']};
            border-radius: 10px;
        }}
        QPushButton#bellOption:checked {{
            background: {t['accent_soft']};
            color: {t['accent']};
            border: 2px solid {t['accent']};
        }}
        QListWidget#wheel {{
            background: transparent;
            border: none;
            color: {t['text']};
            font-size: 20pt;
        }}
        QListWidget#wheel::item:selected {{
            background: {t['accent_soft']};
            color: {t['accent']};
            border-radius: 6px;
        }}
        QCheckBox {{
            color: {t['text']};
        }}
        QCheckBox::indicator:checked {{
            background-color: {t['accent']};
            border: 1px solid {t['accent']};
        }}
        QFrame#divider {{
            color: {t['border']};
        }}
    """
