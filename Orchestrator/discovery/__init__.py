from .resolver import CandidateExecutable, ACCEPT_THRESHOLD, best_match, normalize, resolve, score, tokens
from .apps_folder import current_executable_name, find_apps_folder, launcher_base_dir, list_candidates
from .catalog import KNOWN_APPLICATIONS, LogicalApplication, discover, known_applications
