"""Event identifiers sent on the notification channel."""

SHOW_WELCOME_TOUR = 'SHOW_WELCOME_TOUR'
OPEN_SETTINGS = 'OPEN_SETTINGS'

TASK_RUN = 'TASK_RUN'
TASK_PACKAGE = 'TASK_PACKAGE'
TASK_MAKE = 'TASK_MAKE'

FS_NEW = 'FS_NEW'
FS_SAVE = 'FS_SAVE'
FS_SAVE_GIST = 'FS_SAVE_GIST'
FS_SAVE_FORGE = 'FS_SAVE_FORGE'
