"""Settings constants."""

import re

ALWAYS_MATCH_REGEX = re.compile("(?:)")
NEVER_MATCH_REGEX = re.compile("$.")

DEFAULT_CONSISTENCY_REPORT_FILE = "consistency-report.md"
DEFAULT_EXCLUDE_PATHS = ["/consistency-report\\.md$/"]

SETTINGS_FILE_NAME = "data.json"
LOG_FILE_NAME = "conlinks.log"
HOME_DIR_NAME = ".conlinks"

# Legacy keys, read once and never written back
LEGACY_IGNORE_FILES = "ignoreFiles"
LEGACY_IGNORE_FOLDERS = "ignoreFolders"

# Toggles that can move or delete files in the vault (record key -> display name)
DANGEROUS_SETTINGS = {
    "moveAttachmentsWithNote": "Move Attachments with Note",
    "deleteAttachmentsWithNote": "Delete Unused Attachments with Note",
    "deleteExistFilesWhenMoveNote": "Delete Duplicate Attachments on Note Move",
    "autoCollectAttachments": "Auto Collect Attachments",
}
