"""
First-run setup: collect user info, generate the signing keypair, write the secrets file.
"""
import os
import tempfile
from typing import Dict, Optional

from frauth.crypto import Keypair
from frauth.errors import UserAborted
from frauth.paths import Paths
from frauth.prompts import Prompter
from frauth.schema import UserInfo, encode_user_info

# mkstemp only honours owner-only permissions on POSIX
SUPPORTS_PRIVATE_MODE = os.name == 'posix'


def run(paths: Paths, prompter: Prompter) -> UserInfo:
    """Interactive init flow.

    Raises:
        UserAborted: a confirmation gate was declined
        OSError: directories or the secrets file could not be created/written
        EncodingError: the record could not be serialized
        InteractionError: the prompt could not read an answer
    """
    prompter.say("Welcome to frauth!")

    if not prompter.confirm("Ready to get started?", default=True):
        raise UserAborted("Halting init")

    if paths.user_info.exists():
        prompter.say("\nIt looks like you've already initialized frauth.")
        prompter.say("Do you want to re-initialize? THIS WILL ERASE YOUR EXISTING KEYS AND DATA!")
        if not prompter.confirm("Continue?", default=False):
            raise UserAborted("Halting init")

    prompter.say("\nCreating directories...")
    paths.base_data.mkdir(parents=True, exist_ok=True)
    paths.base_cache.mkdir(parents=True, exist_ok=True)

    # Create the file early so disk errors show up before the user answers anything
    fd, tmp_path = tempfile.mkstemp(dir=paths.base_data, prefix='.user_info.', suffix='.tmp')
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            if not SUPPORTS_PRIVATE_MODE:
                prompter.warn(f"You should set the permissions for {paths.user_info} to only be readable by this user!")
            prompter.say("Done.")

            info = _collect(prompter)
            f.write(encode_user_info(info))
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, paths.user_info)
    except BaseException:
        # Previous secrets file (if any) stays as it was
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass
        raise

    prompter.say("\nfrauth has been initialized!")
    prompter.say(f"Key fingerprint: {info.keypair.fingerprint()}")
    return info


def _collect(prompter: Prompter) -> UserInfo:
    prompter.say("\nOkay! We'll get started by collecting some required info.")
    name = prompter.read_line("What name do you want to go by? (don't leave this blank)")

    prompter.say("\nOkay, that's everything that's required. Now let's collect some optional items.")
    identities = collect_identities(prompter)
    status = collect_status(prompter)

    # Only generate keys once every answer is in
    keypair = Keypair.generate()
    return UserInfo(name=name, identities=identities, status=status, keypair=keypair)


def collect_identities(prompter: Prompter) -> Dict[str, str]:
    """Add/update loop; a repeated label overwrites the earlier id."""
    prompter.say("\nWe'll now collect any identities you'd like to associate with yourself. You can add as many as you like.")
    prompter.say("These identities will be publicly visible to anyone.")
    prompter.say("\nIdentities have a 'name', like 'twitter', 'email', 'mobile', etc.")
    prompter.say("and an 'id', like 'my_twitter_id', 'me@example.com', or '+4912345678901'.")

    identities: Dict[str, str] = {}
    while prompter.confirm("\nAdd/Update an identity?", default=True):
        id_name = prompter.read_line("\nIdentity name")
        id_val = prompter.read_line(f"{id_name} id")
        identities[id_name] = id_val

        prompter.say("\nCurrent identities:")
        for label, value in identities.items():
            prompter.say(f"  {label}: {value}")
    return identities


def collect_status(prompter: Prompter) -> Optional[str]:
    prompter.say("\nWould you like to add a public status message? You can change or add this later as well.")
    if not prompter.confirm("\nAdd a status?", default=True):
        return None
    return prompter.read_line("\nStatus")
