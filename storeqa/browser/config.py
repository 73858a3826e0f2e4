DEFAULT_CONFIG = {
    "headless": True,
    "viewport": {"width": 1920, "height": 1080},
    "language": "en-US",
    "base_url": None,
    "ws_endpoint": None,
    "record_video_dir": None,
}
