"""Help messages for CLI commands"""
# pylint: disable=line-too-long

# `calverlex tag` related sub-commands description
tag_commands = {
    "tag": {
        "config": (
            "Specify the path to a `config.yml` using this option. Optional, the defaults "
            "query https://api.github.com with a two digit year."
        ),
        "next": {
            "short_help": ("Print the next tag for today."),
            "current_version": (
                "The last tag that was issued, ie. 25216a. When given, the next tag is computed from it "
                "and the repository's tags are not listed. Can also be set with INPUT_CURRENT_VERSION."
            ),
            "repository": (
                "The repository to list tags from, as owner/repo. Defaults to GITHUB_REPOSITORY "
                "when run inside a workflow."
            ),
            "token": (
                "Token used to list the repository's tags through the GitHub API. Can also be set "
                "with INPUT_GITHUB_TOKEN or GITHUB_TOKEN."
            ),
            "year_format": (
                "Number of year digits in the date prefix: 2 (25216a) or 4 (2025216a). "
                "Defaults to the `(tag > year_format)` key of the config, which defaults to 2."
            ),
            "tags_json": (
                "A json list of refs, ie. the output of `gh api repos/{owner}/{repo}/git/refs/tags`, "
                "used instead of calling the GitHub API. Can also be set with TAGS."
            ),
            "date": (
                "Compute the tag for this UTC date or datetime instead of now, ie. 2025-01-13."
            ),
        },
        "prefix": {
            "short_help": ("Print the date prefix for today."),
        },
    }
}
