"""
Staff management command-line tool.

Usage:
    manage-staff list                                      - List all staff members
    manage-staff add <username> <password> [fullname]      - Add a new staff member
    manage-staff update-password <username> <newpassword>  - Update a staff member's password
    manage-staff delete <username>                         - Delete a staff member
    manage-staff deactivate <username>                     - Deactivate a staff member
    manage-staff activate <username>                       - Activate a staff member

Requires SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY in the environment (or .env).
Exits with status 1 on any error.
"""

import locale
import logging
import sys
from typing import Callable, List, NamedTuple, Optional

from jobboard.core.config import get_settings
from jobboard.core.exceptions import StaffAdminError, StoreError
from jobboard.core.logging_config import setup_logging
from jobboard.crud import staff as staff_crud
from jobboard.schemas.staff import StaffRecord
from jobboard.services.staff_store_base import StaffStore
from jobboard.services.supabase_store import SupabaseStaffStore

logger = logging.getLogger(__name__)

PROG = "manage-staff"
RULE = "─" * 80

USAGE = f"""
📋 Staff Management Script

Usage:
  {PROG} list                              - List all staff members
  {PROG} add <username> <password> [name]  - Add a new staff member
  {PROG} update-password <username> <pass> - Update a staff member's password
  {PROG} delete <username>                 - Delete a staff member
  {PROG} deactivate <username>             - Deactivate a staff member
  {PROG} activate <username>               - Activate a staff member

Examples:
  {PROG} list
  {PROG} add john "securePassword123" "John Doe"
  {PROG} update-password john "newPassword456"
  {PROG} deactivate john
"""


def use_local_dates() -> None:
    """Switch date formatting to the user's locale; keep the current one if it is unavailable."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error:
        logger.debug("Locale from environment is not available, keeping %s", locale.setlocale(locale.LC_TIME))


def date_format() -> str:
    """The locale's date pattern, always with a four-digit year."""
    try:
        pattern = locale.nl_langinfo(locale.D_FMT)
    except AttributeError:
        # nl_langinfo is not available on Windows
        return "%Y-%m-%d"
    return pattern.replace("%y", "%Y") if pattern else "%Y-%m-%d"


def format_created(staff: StaffRecord) -> str:
    """Creation date in the local timezone and locale, without the time."""
    if staff.created_at is None:
        return "N/A"
    return staff.created_at.astimezone().strftime(date_format())


def print_staff_table(records: List[StaffRecord]) -> None:
    if not records:
        print("📋 No staff members found.")
        return

    print("\n📋 Staff Members:\n")
    print(RULE)
    print(f"{'Username':<20} {'Full Name':<25} {'Role':<15} {'Status':<10} Created")
    print(RULE)

    for staff in records:
        print(
            f"{staff.username:<20} {staff.full_name or 'N/A':<25} {staff.role or 'staff':<15} "
            f"{staff.status:<10} {format_created(staff)}"
        )

    print(RULE)
    print(f"\nTotal: {len(records)} staff member(s)\n")


def run_list(store: StaffStore, args: List[str]) -> None:
    print_staff_table(staff_crud.list_staff(store))


def run_add(store: StaffStore, args: List[str]) -> None:
    username, password = args[0], args[1]
    full_name = args[2] if len(args) > 2 else None

    staff = staff_crud.add_staff(store, username, password, full_name)

    print(f'✅ Staff member "{username}" added successfully!')
    print(f"   Full Name: {staff.full_name or 'Not set'}")
    print(f"   Role: {staff.role}")
    print(f"   Status: {staff.status}\n")


def run_update_password(store: StaffStore, args: List[str]) -> None:
    staff_crud.update_password(store, args[0], args[1])
    print(f'✅ Password updated successfully for "{args[0]}"!\n')


def run_delete(store: StaffStore, args: List[str]) -> None:
    staff_crud.delete_staff(store, args[0])
    print(f'✅ Staff member "{args[0]}" deleted successfully!\n')


def run_deactivate(store: StaffStore, args: List[str]) -> None:
    staff_crud.deactivate_staff(store, args[0])
    print(f'✅ Staff member "{args[0]}" deactivated successfully!\n')


def run_activate(store: StaffStore, args: List[str]) -> None:
    staff_crud.activate_staff(store, args[0])
    print(f'✅ Staff member "{args[0]}" activated successfully!\n')


class Command(NamedTuple):
    min_args: int
    usage: str
    action: str  # used in "Error <action>: ..." for store failures
    handler: Callable[[StaffStore, List[str]], None]


COMMANDS = {
    "list": Command(0, f"{PROG} list", "listing staff", run_list),
    "add": Command(2, f"{PROG} add <username> <password> [fullname]", "adding staff", run_add),
    "update-password": Command(
        2, f"{PROG} update-password <username> <newpassword>", "updating password", run_update_password
    ),
    "delete": Command(1, f"{PROG} delete <username>", "deleting staff", run_delete),
    "deactivate": Command(1, f"{PROG} deactivate <username>", "deactivating staff", run_deactivate),
    "activate": Command(1, f"{PROG} activate <username>", "activating staff", run_activate),
}


def error(message: str) -> None:
    print(f"❌ {message}", file=sys.stderr)


def main(argv: Optional[List[str]] = None, store: Optional[StaffStore] = None) -> int:
    """
    Run one staff management command.

    Args:
        argv: Command and arguments (defaults to sys.argv[1:])
        store: Store to operate on; built from environment settings when omitted

    Returns:
        Process exit code (0 on success, 1 on any failure)
    """
    args = sys.argv[1:] if argv is None else list(argv)
    use_local_dates()
    owns_store = store is None
    command = None

    try:
        # Configuration is checked before the command is even looked at
        if store is None:
            settings = get_settings()
            setup_logging(settings.LOG_LEVEL, settings.JSON_LOGS, stream=sys.stderr)
            store = SupabaseStaffStore.from_settings(settings)

        command = COMMANDS.get(args[0]) if args else None
        if command is None:
            print(USAGE)
            return 1

        if len(args) - 1 < command.min_args:
            error(f"Usage: {command.usage}")
            return 1

        command.handler(store, args[1:])
        return 0

    except StoreError as e:
        action = f" {command.action}" if command else ""
        error(f"Error{action}: {e}")
        return e.exit_code
    except StaffAdminError as e:
        error(f"Error: {e}")
        return e.exit_code
    except Exception as e:
        logger.exception("Unexpected error in staff command")
        error(f"Unexpected error: {e}")
        return 1
    finally:
        if owns_store and store is not None:
            store.close()


if __name__ == "__main__":
    sys.exit(main())
