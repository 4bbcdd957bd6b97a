"""Git hooks that guard protected branches and prefix commit messages."""
