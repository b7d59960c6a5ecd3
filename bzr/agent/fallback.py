"""Canned answers for the most common BZR questions.

Used when no LLM provider can answer. Matching is a plain substring check on
the lowercased question; the first matching topic wins.
"""

from __future__ import annotations

ZAKON = 'Zakon o bezbednosti i zdravlju na radu ("Sl. glasnik RS", br. 101/2005, 91/2015 i 113/2017)'

CANNED_ANSWERS: dict[str, str] = {
    "obaveze poslodavca": f"""# Obaveze poslodavca prema Zakonu o bezbednosti i zdravlju na radu

Prema {ZAKON}, svaki poslodavac u Republici Srbiji ima sledeće ključne obaveze:

1. **Organizovanje poslova BZR** (član 37) - određivanje stručnog lica sa položenim stručnim ispitom.
2. **Akt o proceni rizika** (član 13) - pisani akt za sva radna mesta u radnoj okolini.
3. **Osposobljavanje zaposlenih** (član 27) - obuka prilagođena radnom mestu i rizicima.
4. **Sredstva i oprema za ličnu zaštitu** (član 15) - prema rizicima na radnom mestu.
5. **Ispitivanje uslova radne okoline** (član 15) - periodični pregledi i ispitivanja opreme za rad.
6. **Praćenje zdravstvenog stanja** (član 16) - ciljani lekarski pregledi na radnim mestima sa povećanim rizikom.
7. **Vođenje evidencija** (član 49) - propisane evidencije iz oblasti BZR.
8. **Osiguranje zaposlenih** (član 53) - od povreda na radu i profesionalnih oboljenja.

Nepoštovanje ovih obaveza kažnjava se novčanom kaznom od 800.000 do 1.000.000 dinara (član 69).""",
    "bezbednost na radu": f"""# Bezbednost na radu - Osnovne informacije

Bezbednost i zdravlje na radu je sistem pravila i mera zaštite koji sprečava povrede i profesionalna oboljenja. Oblast uređuje {ZAKON}.

## Osnovni principi (član 12):

1. **Prevencija kao prioritet** - preventivne mere pre početka rada.
2. **Procena rizika** (član 13) - identifikacija svih opasnosti i štetnosti.
3. **Hijerarhija mera** (član 15) - eliminacija, supstitucija, tehničke mere, organizacione mere, lična zaštitna oprema.
4. **Kolektivna zaštita ima prednost** nad individualnom.
5. **Obuka zaposlenih** (članovi 27-30) - uz periodično ponavljanje.""",
    "procena rizika": f"""# Procena rizika na radnom mestu

Procena rizika je sistematski proces identifikacije svih opasnosti i štetnosti kojima mogu biti izloženi zaposleni.

Član 13. {ZAKON}: **"Poslodavac je dužan da donese akt o proceni rizika u pisanoj formi za sva radna mesta u radnoj okolini i da utvrdi način i mere za njihovo otklanjanje."**

## Koraci procene rizika:

1. **Identifikacija opasnosti i štetnosti**
2. **Identifikacija izloženih zaposlenih**
3. **Procena nivoa rizika** - Rizik = Verovatnoća × Posledica
4. **Utvrđivanje preventivnih mera**
5. **Izrada pisanog akta**
6. **Periodično preispitivanje** - posle teške povrede, promene procesa rada ili kada mere nisu adekvatne""",
    "lice za bezbednost": f"""# Lice za bezbednost i zdravlje na radu

Prema članu 37. {ZAKON}, poslodavac određuje stručno lice za bezbednost i zdravlje na radu.

## Osnovne dužnosti (član 40):

1. Učestvovanje u izradi akta o proceni rizika
2. Priprema i sprovođenje preventivnih mera
3. Osposobljavanje zaposlenih za bezbedan rad
4. Praćenje primene mera za bezbednost i zdravlje zaposlenih
5. Praćenje povreda na radu i profesionalnih oboljenja
6. Zabrana rada kada postoji neposredna opasnost po život ili zdravlje zaposlenog
7. Saradnja sa službom medicine rada i inspekcijom rada

Lice mora imati položen stručni ispit o praktičnoj osposobljenosti za obavljanje poslova BZR.""",
    "ppu": """# Prethodni i periodični lekarski pregledi (PPU)

Lekarska uverenja potvrđuju zdravstvenu sposobnost zaposlenih za rad na radnim mestima sa povećanim rizikom (član 43. Zakona o bezbednosti i zdravlju na radu).

1. **Prethodni pregled** - pre početka rada; poslodavac ne sme dozvoliti rad bez uverenja.
2. **Periodični pregled** - u rokovima iz akta o proceni rizika, najčešće na 12 meseci.
3. **Ko izdaje** - isključivo licencirana služba medicine rada.
4. **Kazne** - od 800.000 do 1.000.000 dinara za pravno lice (član 69).""",
    "osiguranje zaposlenih": """# Osiguranje zaposlenih od povreda na radu

**Osiguranje zaposlenih od povreda na radu i profesionalnih bolesti je zakonska obaveza svakog poslodavca** (član 53. Zakona o bezbednosti i zdravlju na radu).

1. **Ko mora biti osiguran** - svi zaposleni, bez obzira na vrstu ugovora.
2. **Ko plaća** - isključivo poslodavac.
3. **Kako** - ugovorom sa osiguravajućim društvom, najčešće kolektivnom polisom.
4. **Kazne** - od 800.000 do 1.000.000 dinara za pravno lice, od 40.000 do 50.000 dinara za odgovorno lice.""",
}

_PENALTIES_HINT = (
    "Kazne za prekršaje u oblasti BZR definisane su članovima 69-73 Zakona o bezbednosti "
    "i zdravlju na radu, a kreću se od 800.000 do 1.000.000 dinara za pravna lica za teže prekršaje."
)
_TRAINING_HINT = (
    "Osposobljavanje za bezbedan rad regulisano je članovima 27-31 Zakona o bezbednosti "
    "i zdravlju na radu i mora se sprovesti pre početka rada zaposlenog."
)
_EQUIPMENT_HINT = (
    "Sredstva i oprema za ličnu zaštitu regulisani su članom 15 Zakona i Pravilnikom o preventivnim "
    "merama za bezbedan i zdrav rad pri korišćenju sredstava i opreme za ličnu zaštitu na radu."
)


def _hint_for(normalized_query: str) -> str:
    if "kazn" in normalized_query or "prekršaj" in normalized_query:
        return _PENALTIES_HINT
    if "osposobljavanje" in normalized_query or "obuka" in normalized_query:
        return _TRAINING_HINT
    if "oprema" in normalized_query or "sredstva" in normalized_query:
        return _EQUIPMENT_HINT
    return ""


def default_response(query: str) -> str:
    """Best canned answer for a question. Always returns text."""
    normalized = query.lower().strip()

    for topic, answer in CANNED_ANSWERS.items():
        if topic in normalized:
            return answer

    return f"""# Odgovor na Vaše pitanje o bezbednosti i zdravlju na radu

Poštovani, na osnovu Vašeg pitanja "{query}", mogu Vam pružiti sledeće informacije:

{ZAKON} reguliše ovu oblast i propisuje konkretne obaveze i mere koje moraju biti implementirane na radnim mestima.

{_hint_for(normalized)}

Da bih Vam pružio precizniji odgovor, molim Vas da postavite specifičnije pitanje vezano za:
- Konkretne obaveze poslodavca koje Vas interesuju
- Procenu rizika i potrebnu dokumentaciju
- Ulogu lica za bezbednost i zdravlje na radu
- Osposobljavanje za bezbedan rad
- Osiguranje od povreda na radu"""
