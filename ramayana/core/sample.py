# Minimal document compiled into the package. Used when the bundled
# resource is missing or unreadable, so the reader always has something
# to show.
SAMPLE_JSON = """
{
    "kandas": [
        {
            "Kanda_Number": "1",
            "Sanskrit_Name": "बालकाण्ड",
            "Description": "Bāla Kāṇḍa - The Book of Youth",
            "Theme_Color": "#FFA500",
            "Sargas": [
                {
                    "Sarga_Number": "1",
                    "Description": "First chapter of Bala Kanda",
                    "Sloka_Count": 40,
                    "Shlokas": [
                        {
                            "Shloka_Number": "1.1.1",
                            "Sanskrit": "तपःस्वाध्यायनिरतं तपस्वी वाग्विदां वरम् । नारदं परिपप्रच्छ वाल्मीकिर्मुनिपुङ्गवम् ॥",
                            "Roman_Transliteration": "tapaḥsvādhyāyaniratam tapasvī vāgvidāṃ varam । nāradaṃ paripapraccha vālmīkirmunipuṅgavam ॥",
                            "Meaning": "Vālmīki, engaged in penance and study, asked Nārada, the best among speakers and sages."
                        }
                    ]
                }
            ]
        }
    ]
}
"""
