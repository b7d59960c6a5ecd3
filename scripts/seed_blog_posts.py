"""Seed the database with introductory BZR blog articles.

Existing slugs are skipped, so the script is safe to re-run.

Usage:
    python -m scripts.seed_blog_posts
    python -m scripts.seed_blog_posts --status pending_approval
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

os.environ.setdefault("PYTHONIOENCODING", "utf-8")
if sys.stdout and sys.stdout.encoding != "utf-8":
    sys.stdout.reconfigure(encoding="utf-8")

sys.path.insert(0, str(Path(__file__).parent.parent))

from loguru import logger

from bzr import db
from bzr.blog.creation import create_excerpt, image_for_category
from bzr.blog.slug import generate_slug
from bzr.models import BlogPost, BlogStatus

SEED_POSTS = [
    {
        "title": "Kaznene odredbe Zakona o bezbednosti i zdravlju na radu: Obaveza osiguranja zaposlenih",
        "category": "propisi",
        "tags": ["zakon", "kazne", "osiguranje", "član 53", "član 69"],
        "content": (
            "Poslodavac je dužan da osigura zaposlene od povreda na radu, profesionalnih oboljenja "
            "i bolesti u vezi sa radom. Troškove osiguranja snosi isključivo poslodavac. "
            "Ukoliko poslodavac ne ispuni ovu obavezu, prekršajna kazna za pravno lice iznosi od "
            "800.000 do 1.000.000 dinara, a za odgovorno lice od 40.000 do 50.000 dinara. "
            "Polisa osiguranja je deo obavezne dokumentacije iz oblasti BZR."
        ),
    },
    {
        "title": "Zakon o bezbednosti i zdravlju na radu: Šta svaki poslodavac mora znati",
        "category": "propisi",
        "tags": ["zakon", "propisi", "obaveze poslodavca", "kazne"],
        "content": (
            "Zakon o bezbednosti i zdravlju na radu propisuje obaveze poslodavca: organizovanje "
            "poslova BZR, donošenje akta o proceni rizika, osposobljavanje zaposlenih za bezbedan rad, "
            "obezbeđivanje lične zaštitne opreme, periodične preglede i ispitivanja opreme za rad "
            "i vođenje propisanih evidencija. Inspekcija rada nadzire primenu zakona."
        ),
    },
    {
        "title": "Procena rizika na radnom mestu: Korak po korak vodič",
        "category": "procena-rizika",
        "tags": ["procena rizika", "opasnosti", "štetnosti", "mere zaštite", "akt o proceni rizika"],
        "content": (
            "Procena rizika na radnom mestu je sistematsko evidentiranje i procenjivanje svih faktora "
            "u procesu rada koji mogu uzrokovati povrede ili oštećenje zdravlja. Postupak obuhvata "
            "identifikaciju opasnosti i štetnosti, procenu nivoa rizika, utvrđivanje mera za "
            "otklanjanje ili smanjenje rizika i izradu pisanog akta o proceni rizika. "
            "Akt se preispituje posle teške povrede na radu ili promene procesa rada."
        ),
    },
    {
        "title": "Značaj lične zaštitne opreme na radnom mestu",
        "category": "zaštitna-oprema",
        "tags": ["lična zaštitna oprema", "LZO", "zaštita na radu", "zaštitna sredstva"],
        "content": (
            "Lična zaštitna oprema se koristi kada se rizik ne može otkloniti tehničkim ili "
            "organizacionim merama. Poslodavac je dužan da zaposlenom obezbedi odgovarajuću opremu "
            "bez naknade, a zaposleni je dužan da je namenski koristi i održava."
        ),
    },
    {
        "title": "Osposobljavanje zaposlenih za bezbedan i zdrav rad",
        "category": "obuka",
        "tags": ["osposobljavanje", "obuka", "edukacija", "bezbednost na radu"],
        "content": (
            "Osposobljavanje za bezbedan i zdrav rad sprovodi se pri zasnivanju radnog odnosa, "
            "premeštaju na drugo radno mesto, uvođenju nove tehnologije ili opreme za rad i "
            "promeni procesa rada. Obuka se sprovodi teorijski i praktično i mora se periodično "
            "ponavljati za radna mesta sa povećanim rizikom."
        ),
    },
    {
        "title": "Prva pomoć na radnom mestu: Šta svaki poslodavac mora obezbediti",
        "category": "bezbednost-na-radu",
        "tags": ["prva pomoć", "ormarić za prvu pomoć", "osposobljavanje", "opasnost"],
        "content": (
            "Poslodavac mora obezbediti ormarić za prvu pomoć, odrediti zaposlene osposobljene za "
            "pružanje prve pomoći i istaći uputstva za postupanje u hitnim slučajevima. "
            "Broj osposobljenih zaposlenih zavisi od broja zaposlenih i nivoa rizika."
        ),
    },
]


def seed(status: BlogStatus = BlogStatus.PUBLISHED) -> int:
    """Insert seed posts that are not stored yet. Returns how many were added."""
    db.init_db()
    existing = set(db.get_all_slugs())
    added = 0

    for item in SEED_POSTS:
        slug = generate_slug(item["title"])
        if slug in existing:
            logger.debug("Skipping existing post: {}", slug)
            continue

        db.create_blog_post(
            BlogPost(
                title=item["title"],
                slug=slug,
                content=item["content"],
                excerpt=create_excerpt(item["content"]),
                image_url=image_for_category(item["category"]),
                category=item["category"],
                tags=item["tags"],
                status=status,
            )
        )
        existing.add(slug)
        added += 1

    logger.info("Seeded {} blog posts ({} already present)", added, len(SEED_POSTS) - added)
    return added


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed BZR blog posts")
    parser.add_argument(
        "--status",
        default=BlogStatus.PUBLISHED.value,
        choices=[s.value for s in BlogStatus],
        help="Status for the seeded posts (default: published)",
    )
    args = parser.parse_args()
    seed(BlogStatus(args.status))


if __name__ == "__main__":
    main()
