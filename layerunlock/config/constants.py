"""Application-wide constants."""

APP_NAME = "LayerUnlock"
APP_VERSION = "0.1.0"
ORG_NAME = "LayerUnlock"

# Progress panel
PROGRESS_TITLE = "Unlocking Layers…"
PROGRESS_LABEL_CHARS = 44
PROGRESS_BAR_WIDTH = 360
PROGRESS_BAR_HEIGHT = 14
PROGRESS_MIN = 0
PROGRESS_MAX = 100

# Report progress after every Nth unlocked layer (bigger = faster, choppier bar)
UI_UPDATE_EVERY = 12

# Pauses around progress repaints, in milliseconds
REFRESH_PAUSE_MS = 0
EMPTY_PAUSE_MS = 150
FINISH_PAUSE_MS = 180

# Low-level descriptor keys
DESCRIPTOR_LAYER_ID = "layerID"
DESCRIPTOR_NAME = "name"
DESCRIPTOR_LOCKING = "layerLocking"

# Host action ids
ACTION_CONVERT_TO_LAYER = "convertToLayer"

# Progress text
TEXT_PREPARING = "Preparing…"
TEXT_SCANNING = "Scanning for locked layers…"
TEXT_UNLOCKING_START = "Unlocking… 0 / {total} (skipping already-unlocked)"
TEXT_UNLOCKING = "Unlocking… {done} / {total}"
TEXT_NOTHING_LOCKED = "Nothing was locked, all clear!"
TEXT_DONE = "Done!"

# Final alerts
MSG_NO_DOCUMENT = "No open document found."
MSG_NOTHING_LOCKED = TEXT_NOTHING_LOCKED
MSG_FINISHED = "Finished. Locked layers/groups were unlocked."
MSG_ERROR = "Error: {error}"
