"""
Interactive menu for the Cheese Directory
=========================================

Run it like:

    cheesedir
    python main.py

The menu loads the dataset once at startup, keeps the records in a
RecordStore, and mirrors every change into SQLite. Each choice runs to
completion before the next prompt; invalid input is re-prompted forever.
"""

import logging
import sys
from enum import IntEnum
from typing import Callable, List, Optional

from cheesedir.config import AppConfig, ConfigurationError, get_config, get_environment
from cheesedir.ingestion import (
    DataFileError,
    decode_row,
    encode,
    load_records,
    persist_records,
)
from cheesedir.models import NOT_AVAILABLE, CheeseRecord
from cheesedir.services import CheeseMirrorService, MirrorStoreError, RecordStore

logger = logging.getLogger(__name__)


class MenuOption(IntEnum):
    RELOAD = 1
    PERSIST = 2
    DISPLAY_ALL = 3
    CREATE = 4
    DISPLAY = 5
    EDIT = 6
    DELETE = 7
    EXIT = 8


MENU_LABELS = {
    MenuOption.RELOAD: "Reload the data",
    MenuOption.PERSIST: "Persist the records to file",
    MenuOption.DISPLAY_ALL: "Display all records",
    MenuOption.CREATE: "Create a new record",
    MenuOption.DISPLAY: "Display a record",
    MenuOption.EDIT: "Edit a record",
    MenuOption.DELETE: "Delete a record",
    MenuOption.EXIT: "Exit",
}

# Prompt labels in CheeseRecord field order (matches encode/decode_row)
FIELD_PROMPTS = [
    "Cheese ID (int)",
    "Cheese Name",
    "Manufacturer Name",
    "Manufacturer Prov Code",
    "Manufacturing Type",
    "Website",
    "Fat Content Percent (float)",
    "Moisture Percent (float)",
    "Particularities",
    "Flavour",
    "Characteristics",
    "Ripening",
    "Organic (bool)",
    "Category Type",
    "Milk Type",
    "Milk Treatment Type",
    "Rind Type",
    "Last Update Date",
]

ReadFn = Callable[[str], str]
WriteFn = Callable[[str], None]


def prompt_bounded_int(prompt: str, low: int, high: int, read: ReadFn = input, write: WriteFn = print) -> int:
    """Prompt until the user enters an integer in [low, high].

    There is no way to cancel; end of input raises EOFError.
    """
    while True:
        text = read(prompt)
        try:
            value = int(text.strip())
        except ValueError:
            write("\nPlease enter a valid integer.")
            continue
        if value < low or value > high:
            write(f"\nPlease enter a valid integer between {low} and {high}.")
            continue
        return value


def format_record(record: CheeseRecord) -> str:
    return ", ".join(
        f"{label}: {value}" for label, value in zip(FIELD_PROMPTS, encode(record))
    )


class MenuController:
    """Dispatches menu choices to operations on the store and its mirror."""

    def __init__(
        self,
        config: AppConfig,
        store: RecordStore,
        mirror: Optional[CheeseMirrorService] = None,
        read: Optional[ReadFn] = None,
        write: Optional[WriteFn] = None,
    ):
        self.config = config
        self.store = store
        self.mirror = mirror
        self._read = read or input
        self._write = write or print

    def _sync(self) -> None:
        if self.mirror is not None:
            self.mirror.sync(self.store)

    def _current_records(self) -> List[CheeseRecord]:
        if self.mirror is not None:
            return self.mirror.get_all()
        return self.store.records()

    def _record_count(self) -> int:
        if self.mirror is not None:
            return self.mirror.count()
        return len(self.store)

    def _prompt_index(self, action: str, count: int) -> Optional[int]:
        if count == 0:
            self._write("\nThere are no records to " + action + ".")
            return None
        return prompt_bounded_int(
            f"\nPlease enter the # of the record you would like to {action}: ",
            0,
            count - 1,
            self._read,
            self._write,
        )

    def show_menu(self) -> MenuOption:
        self._write("\nCanadian Cheese Directory")
        self._write("Please choose from the following options:")
        for option in MenuOption:
            self._write(f" {option.value}. {MENU_LABELS[option]}")
        choice = prompt_bounded_int(
            "Please choose an option: ",
            MenuOption.RELOAD.value,
            MenuOption.EXIT.value,
            self._read,
            self._write,
        )
        return MenuOption(choice)

    def reload(self) -> None:
        self._write("Reloading data...")
        self.store.replace_all(
            load_records(self.config.data.csv_path, self.config.data.record_limit)
        )
        self._sync()
        self._write(f"Loaded {len(self.store)} records.")

    def persist(self) -> None:
        path = self.config.data.output_path
        self._write(f"\nWriting all records to {path}.")
        persist_records(self._current_records(), path)
        self._write(f"\nDone writing to {path}.")

    def display_all(self) -> None:
        self._write("\nDisplaying all records...\n")
        for i, record in enumerate(self._current_records()):
            self._write(f"Record ID: {i}: {format_record(record)}")

    def display(self) -> None:
        index = self._prompt_index("display", self._record_count())
        if index is None:
            return
        if self.mirror is not None:
            record = self.mirror.get_by_position(index)
        else:
            record = self.store.get_at(index)
        self._write(f"\nDisplaying Record #{index}:\n{format_record(record)}")

    def _read_value(self, label: str) -> str:
        value = self._read(f"Please enter the {label}: ").strip()
        return value or NOT_AVAILABLE

    def _read_value_or_default(self, label: str, default: str) -> str:
        value = self._read(f"Please enter the {label} [{default}]: ").strip()
        return value or default

    def create(self) -> None:
        self._write("\nCreating record...\n")
        values = [self._read_value(label) for label in FIELD_PROMPTS]
        record = decode_row(values)
        self.store.append(record)
        self._sync()
        logger.info(f"Created record #{len(self.store) - 1} (cheese id {record.cheese_id})")
        self._write(f"\nCreated the following record:\n{format_record(record)}")

    def edit(self) -> None:
        index = self._prompt_index("edit", len(self.store))
        if index is None:
            return
        current = self.store.get_at(index)
        self._write(f"\nEditing Record #{index}:\n{format_record(current)}")
        self._write("\nPress Enter to keep the same value, otherwise input your value...\n")

        values = [
            self._read_value_or_default(label, default)
            for label, default in zip(FIELD_PROMPTS, encode(current))
        ]
        record = decode_row(values)
        self.store.replace_at(index, record)
        self._sync()
        logger.info(f"Edited record #{index}")
        self._write(f"\nChanged the record to:\n{format_record(record)}")

    def delete(self) -> None:
        index = self._prompt_index("delete", len(self.store))
        if index is None:
            return
        record = self.store.remove_at(index)
        self._sync()
        logger.info(f"Deleted record #{index} (cheese id {record.cheese_id})")
        self._write(f"\nDeleted the following record:\n{format_record(record)}")

    def run(self) -> None:
        """Show the menu and process choices until the user exits."""
        handlers = {
            MenuOption.RELOAD: self.reload,
            MenuOption.PERSIST: self.persist,
            MenuOption.DISPLAY_ALL: self.display_all,
            MenuOption.CREATE: self.create,
            MenuOption.DISPLAY: self.display,
            MenuOption.EDIT: self.edit,
            MenuOption.DELETE: self.delete,
        }
        while True:
            choice = self.show_menu()
            if choice == MenuOption.EXIT:
                self._write("Goodbye")
                return
            handlers[choice]()


def main() -> int:
    """Entry point for the Cheese Directory CLI.

    1) Load configuration and the dataset
    2) Open and sync the mirror database
    3) Run the interactive menu

    Returns the process exit status.
    """
    try:
        config = get_config()
    except ConfigurationError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(f"Configuration error: {e}")
        return 1

    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Starting Cheese Directory ({get_environment()} environment)")

    mirror: Optional[CheeseMirrorService] = None
    try:
        store = RecordStore(
            load_records(config.data.csv_path, config.data.record_limit)
        )
        if config.database.mirror_enabled:
            mirror = CheeseMirrorService(config.database.path)
            mirror.sync(store)

        controller = MenuController(config, store, mirror)
        controller.run()
    except (DataFileError, MirrorStoreError) as e:
        logger.error(f"Fatal error: {e}")
        return 1
    except (EOFError, KeyboardInterrupt):
        print("\nGoodbye")
    finally:
        if mirror is not None:
            mirror.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
