"""X11 colour names and XPM image parsing."""