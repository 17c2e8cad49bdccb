from .exceptions import ChatlogError
from .outcome import Outcome
from .config import Config
from .file_system import FileSystem
from .cache import RecentSubjectStore
from .workspace import Workspace, Resolution
