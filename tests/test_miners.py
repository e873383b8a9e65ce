"""Tests for the pure link and email miners: emails, social links, contact page."""

from __future__ import annotations

import pytest

from contact_scraper.scraper.contact_page import select_contact_page
from contact_scraper.scraper.emails import EMAIL_RE, combine_sources, mine_emails
from contact_scraper.scraper.models import SOCIAL_PLATFORMS, Anchor
from contact_scraper.scraper.social import (
    classify_link,
    extract_social_links,
    merge_social_links,
)


# ---------------------------------------------------------------------------
# Email miner
# ---------------------------------------------------------------------------

class TestMineEmails:
    def test_mailto_and_text_variants_collapse(self) -> None:
        blob = combine_sources("Contact: SALES@ACME.TEST", ["sales@acme.test"])
        assert mine_emails(blob) == {"sales@acme.test"}

    def test_every_entry_matches_email_shape(self) -> None:
        text = "a.b-c_d@mail.example.org, x@y.io and not-an-email@ nor @foo.com"
        found = mine_emails(text)
        assert found == {"a.b-c_d@mail.example.org", "x@y.io"}
        assert all(EMAIL_RE.fullmatch(e) for e in found)

    def test_is_deterministic(self) -> None:
        text = "b@acme.test a@acme.test B@ACME.TEST"
        assert mine_emails(text) == mine_emails(text) == {"a@acme.test", "b@acme.test"}

    @pytest.mark.parametrize(
        "asset",
        [
            "photo@2x.png",
            "logo@3x.JPG",
            "icon@1x.svg",
            "bundle@v2.min.js",
            "theme@main.css",
            "font@latin.woff",
            "clip@hd.webm",
        ],
    )
    def test_asset_filenames_dropped(self, asset: str) -> None:
        assert mine_emails(f"see {asset} or hello@acme.test") == {"hello@acme.test"}

    def test_single_letter_tld_rejected(self) -> None:
        assert mine_emails("user@host.x") == set()

    def test_empty_text(self) -> None:
        assert mine_emails("") == set()


# ---------------------------------------------------------------------------
# Social links
# ---------------------------------------------------------------------------

class TestSocialLinks:
    @pytest.mark.parametrize(
        "href, platform",
        [
            ("https://www.facebook.com/acme", "facebook"),
            ("https://twitter.com/acme", "twitter"),
            ("https://x.com/acme", "twitter"),
            ("https://www.linkedin.com/company/acme", "linkedin"),
            ("https://instagram.com/acme", "instagram"),
            ("https://www.youtube.com/@acme", "youtube"),
            ("https://youtu.be/abc123", "youtube"),
            ("https://www.tiktok.com/@acme", "tiktok"),
            ("HTTPS://FACEBOOK.COM/Acme", "facebook"),
        ],
    )
    def test_classifies_profiles(self, href: str, platform: str) -> None:
        assert classify_link(href) == platform

    @pytest.mark.parametrize(
        "href",
        [
            "https://www.facebook.com/sharer/sharer.php?u=https://acme.test",
            "https://twitter.com/intent/tweet?text=hi",
            "https://www.linkedin.com/shareArticle?url=x",
        ],
    )
    def test_share_links_excluded(self, href: str) -> None:
        assert classify_link(href) is None

    def test_non_social_links_ignored(self) -> None:
        assert classify_link("https://www.dropbox.com/acme") is None
        assert classify_link("/about") is None

    def test_extract_dedups_and_buckets(self) -> None:
        anchors = [
            Anchor("https://facebook.com/acme", "fb"),
            Anchor("https://facebook.com/acme", "fb again"),
            Anchor("https://x.com/acme", "x"),
            Anchor("https://twitter.com/share?url=a", "share"),
            Anchor("/contact", "Contact"),
        ]
        links = extract_social_links(anchors)
        assert set(links) == set(SOCIAL_PLATFORMS)
        assert links["facebook"] == ["https://facebook.com/acme"]
        assert links["twitter"] == ["https://x.com/acme"]
        assert links["youtube"] == []

    def test_each_link_in_one_category(self) -> None:
        anchors = [Anchor("https://facebook.com/acme", ""), Anchor("https://linkedin.com/in/a", "")]
        links = extract_social_links(anchors)
        flat = [href for hrefs in links.values() for href in hrefs]
        assert sorted(flat) == sorted(a.href for a in anchors)

    def test_merge_is_per_category_union(self) -> None:
        home = extract_social_links([Anchor("https://facebook.com/acme", "")])
        contact = extract_social_links(
            [Anchor("https://facebook.com/acme", ""), Anchor("https://instagram.com/acme", "")]
        )
        merged = merge_social_links(home, contact)
        assert merged["facebook"] == ["https://facebook.com/acme"]
        assert merged["instagram"] == ["https://instagram.com/acme"]


# ---------------------------------------------------------------------------
# Contact page selector
# ---------------------------------------------------------------------------

class TestSelectContactPage:
    def test_relative_href_resolved_against_base(self) -> None:
        anchors = [Anchor("/services", "Services"), Anchor("/contact-us", "Contact")]
        assert select_contact_page(anchors, "https://acme.test") == "https://acme.test/contact-us"

    def test_matches_on_about_text(self) -> None:
        anchors = [Anchor("/team", "About the team")]
        assert select_contact_page(anchors, "https://acme.test/") == "https://acme.test/team"

    def test_matches_on_href_only(self) -> None:
        anchors = [Anchor("pages/Contact.html", "Get in touch")]
        assert (
            select_contact_page(anchors, "https://acme.test/en/")
            == "https://acme.test/en/pages/Contact.html"
        )

    def test_first_match_wins(self) -> None:
        anchors = [
            Anchor("/about", "About"),
            Anchor("/contact", "Contact"),
        ]
        assert select_contact_page(anchors, "https://acme.test") == "https://acme.test/about"

    def test_absolute_href_kept(self) -> None:
        anchors = [Anchor("https://help.acme.test/contact", "Help")]
        assert select_contact_page(anchors, "https://acme.test") == "https://help.acme.test/contact"

    def test_mailto_and_fragments_skipped(self) -> None:
        anchors = [
            Anchor("mailto:contact@acme.test", "Contact"),
            Anchor("#contact", "Contact"),
            Anchor("/kontakt", "Contact us"),
        ]
        assert select_contact_page(anchors, "https://acme.test") == "https://acme.test/kontakt"

    def test_no_qualifying_anchor(self) -> None:
        anchors = [Anchor("/pricing", "Pricing"), Anchor("/blog", "Blog")]
        assert select_contact_page(anchors, "https://acme.test") is None
