"""Follow-up instructions printed after a successful release."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReleaseNextSteps:
    """Canonical commands for finishing a release by hand."""

    tag_name: str
    version_file: str

    @property
    def push_tag(self) -> str:
        return f"git push origin {self.tag_name}"

    @property
    def clean_build(self) -> str:
        return "make clobber"

    @property
    def commit(self) -> str:
        return f'git commit -m "bump version after {self.tag_name}" {self.version_file}'


def format_next_steps(steps: ReleaseNextSteps) -> str:
    return f"""Next steps:
  1. Push the release tag:     {steps.push_tag}
  2. Clean the build:          {steps.clean_build}
  3. Bump the version in {steps.version_file}
  4. Commit the version bump:  {steps.commit}"""
