"""
Console entry point: read chat lines from stdin and print canonical commands
"""

import sys
from typing import Optional
from taskchat.config.settings import settings
from taskchat.services.chat_interpreter import ChatInterpreter
from taskchat.utils.date_utils import get_current_datetime
from taskchat.utils.logger import logger


EXIT_WORDS = ("bye", "exit", "quit")
GOODBYE_MESSAGE = "Bye! See you next time."


class ChatConsole:
    """Interactive console around the chat interpreter"""

    def __init__(self, interpreter: Optional[ChatInterpreter] = None):
        """Initialize console"""
        self.interpreter = interpreter or ChatInterpreter()
        self.logger = logger

    def handle_line(self, line: str) -> str:
        """
        Handle one chat line

        Args:
            line: Raw input line

        Returns:
            Text to print: the command, plus help or a date hint when needed
        """
        response = self.interpreter.handle(line, get_current_datetime())
        command = response.command

        if not command:
            return response.message

        output = f"→ {command}"
        if response.message != command:
            output += f"\n{response.message}"
        if response.data.get("date_time"):
            output += f"\n📅 {response.data['date_time']}"
        return output

    def run(self, stream=sys.stdin):
        """Read lines until EOF or an exit word"""
        self.logger.info("Chat console started")
        print("Type a message (or 'bye' to quit).")
        for line in stream:
            text = line.strip()
            if not text:
                continue

            if text.lower() in EXIT_WORDS:
                print(GOODBYE_MESSAGE)
                break

            print(self.handle_line(text))
        self.logger.info("Chat console stopped")


def main():
    """Main entry point"""
    try:
        settings.validate()
        ChatConsole().run()
    except KeyboardInterrupt:
        logger.info("Received shutdown signal")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
