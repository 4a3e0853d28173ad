"""CLI constants and configuration."""

from prompt_toolkit.styles import Style

COMMANDS = [
    "guest", "token", "upload", "upload-url", "list", "download", "stats", "delete",
    "activity", "webhooks", "add-webhook", "delete-webhook", "projects", "add-project",
    "delete-project", "export", "delete-account", "clear", "exit", "help",
]

STYLE = Style.from_dict(
    {
        "prompt": "#7C3AED bold",
        "command": "#0088ff bold",
    }
)

VIOLET = "\033[38;2;124;58;237m"
RESET = "\033[0m"

LOGO = f"""{VIOLET}
 ____        _   ____        _
|  _ \\ _   _| |_|  _ \\ _   _| |_
| |_) | | | | __| |_) | | | | __|
|  __/| |_| | |_|  __/| |_| | |_
|_|    \\__,_|\\__|_|    \\__,_|\\__|
{RESET}"""

WELCOME_TITLE = "PutPut CLI - File hosting from the terminal"
WELCOME_HELP = "Type 'help' for commands or 'exit' to quit.\n"

PROMPT_TEXT = "putput> "

HELP_TEXT = """Available commands:
  guest                                   Create a guest account and save its token
  token <token>                           Save an existing API token
  upload <file> [tag ...] [options]       Upload a local file
      --private  --prefix <p>  --type <mime>  --expires <iso-datetime>
  upload-url <url> [tag ...] [options]    Have the server fetch and store a URL
      --private  --prefix <p>  --name <filename>
  list [options]                          List files
      --tag <t>  --prefix <p>  --project <id>  --limit <n>  --cursor <c>
  download <id> [output_path]             Show the download URL, or save the file
  stats <id>                              Show download count and size of a file
  delete <id>                             Delete a file
  activity [--limit <n>] [--cursor <c>]   Show account activity
  webhooks                                List webhooks
  add-webhook <url> [event ...]           Create a webhook
  delete-webhook <id>                     Delete a webhook
  projects                                List projects
  add-project <name>                      Create a project
  delete-project <id>                     Delete a project (files are kept)
  export                                  Export account data as JSON
  delete-account --yes                    Permanently delete the account
  clear                                   Clear screen and redisplay welcome message
  help                                    Show this help
  exit                                    Exit REPL

Examples:
  guest
  upload photo.jpg avatars --prefix users --private
  list --tag avatars --limit 20
  download 6f1c2d3e-... downloads/photo.jpg
  add-webhook https://example.com/hook upload delete"""
