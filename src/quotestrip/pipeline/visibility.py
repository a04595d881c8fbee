"""Visibility Classifier: decides which fragments are hidden.

Single top-to-bottom pass. Noise (quoted, signature or blank fragments)
before the first substantive fragment stays visible, so a reply that opens
with a quote is not emptied. Once real content has been seen, all later
noise is hidden. Forwarded fragments are never noise.
"""

from dataclasses import replace

from quotestrip.message import Fragment


def is_noise(fragment: Fragment) -> bool:
    """Whether a fragment is a candidate for hiding.

    Args:
        fragment: A finalized fragment.

    Returns:
        True for quoted, signature and blank fragments that are not forwarded.
    """
    if fragment.forwarded:
        return False

    return fragment.quoted or fragment.signature or fragment.is_blank


class VisibilityClassifier:
    """Assigns the hidden attribute of every fragment."""

    def classify(self, fragments: tuple[Fragment, ...]) -> tuple[Fragment, ...]:
        """Set hidden on each fragment.

        Args:
            fragments: Finalized fragments in top-to-bottom order.

        Returns:
            New fragments, identical except for hidden.
        """
        found_visible = False
        classified: list[Fragment] = []

        for fragment in fragments:
            noise = is_noise(fragment)

            # The fragment that sets found_visible is itself content
            if not found_visible and not noise:
                found_visible = True

            classified.append(replace(fragment, hidden=found_visible and noise))

        return tuple(classified)
