from calverlex.utils.actions_utils import running_in_actions, write_output
from calverlex.utils.cli_utils import query_dict
