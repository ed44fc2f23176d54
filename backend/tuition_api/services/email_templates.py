"""
Email Templates — HTML and plain-text payment confirmations.
Both renderers take their amounts from the same PaymentDisplay.
"""
from datetime import datetime
from html import escape

from tuition_api.models.payment import PaymentRecord
from tuition_api.utils.formatting import PaymentDisplay

# Destination accounts listed in the transfer instructions
BANK_ACCOUNTS = (
    ("BSI", "7304398878"),
    ("BTN", "14901500142223"),
    ("BRI", "009501004410307"),
    ("BNI", "5516000000"),
)

_STYLE = """
        body { font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; line-height: 1.6;
               color: #333; margin: 0; padding: 0; background-color: #f4f4f4; }
        .container { max-width: 600px; margin: 0 auto; background-color: #ffffff; border-radius: 10px;
                     overflow: hidden; box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1); }
        .header { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white;
                  padding: 30px; text-align: center; }
        .header h1 { margin: 0; font-size: 28px; }
        .content { padding: 30px; }
        .section { margin-bottom: 25px; }
        .section-title { color: #4a5568; font-size: 18px; font-weight: 600; margin-bottom: 15px;
                         padding-bottom: 8px; border-bottom: 2px solid #e2e8f0; }
        .info-grid { display: grid; grid-template-columns: 1fr 2fr; gap: 12px; }
        .info-label { color: #718096; font-weight: 500; }
        .info-value { color: #2d3748; font-weight: 600; }
        .payment-card { background: linear-gradient(135deg, #f6d365 0%, #fda085 100%);
                        border-radius: 8px; padding: 20px; color: white; margin: 20px 0; }
        .amount { font-size: 32px; font-weight: bold; text-align: center; margin: 10px 0; }
        .instructions { background-color: #edf2f7; border-radius: 8px; padding: 20px; margin-top: 25px; }
        .footer { background-color: #f7fafc; padding: 20px; text-align: center; color: #718096;
                  font-size: 14px; border-top: 1px solid #e2e8f0; }
        .success-icon { font-size: 48px; color: #48bb78; margin-bottom: 20px; }
"""


def subject_for(record: PaymentRecord) -> str:
    return f"Konfirmasi Pembayaran - {record.student_id}"


def render_html(record: PaymentRecord, display: PaymentDisplay, institution: str) -> str:
    """Rich confirmation email. User-supplied values are HTML-escaped."""
    name = escape(record.name)
    banks = "\n".join(
        f"                            <li>{bank} : {number}</li>" for bank, number in BANK_ACCOUNTS
    )
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Konfirmasi Pembayaran</title>
    <style>{_STYLE}    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>&#9989; Pembayaran Berhasil</h1>
            <p>Konfirmasi Pembayaran Online</p>
        </div>

        <div class="content">
            <div style="text-align: center;" class="section">
                <div class="success-icon">&#10003;</div>
                <h2 style="color: #2d3748; margin: 0 0 10px 0;">Terima Kasih {name}</h2>
                <p style="color: #718096; margin: 0;">Pembayaran Anda telah berhasil direkam</p>
            </div>

            <div class="section">
                <div class="section-title">Informasi Mahasiswa</div>
                <div class="info-grid">
                    <div class="info-label">Nama Lengkap</div>
                    <div class="info-value">{name}</div>
                    <div class="info-label">Email</div>
                    <div class="info-value">{escape(record.email)}</div>
                    <div class="info-label">NIM</div>
                    <div class="info-value">{escape(record.student_id)}</div>
                    <div class="info-label">Program Studi</div>
                    <div class="info-value">{escape(record.program)}</div>
                    <div class="info-label">Semester</div>
                    <div class="info-value">Semester {record.semester}</div>
                </div>
            </div>

            <div class="section">
                <div class="section-title">Detail Pembayaran</div>
                <div class="payment-card">
                    <div style="text-align: center;">
                        <div style="font-size: 14px; opacity: 0.9;">Jumlah yang harus dibayar</div>
                        <div class="amount">{display.transfer}</div>
                        <div style="font-size: 14px; opacity: 0.9; margin-top: 10px;">
                            <span>{display.base} + Kode Unik: {display.unique_code}</span>
                        </div>
                    </div>
                </div>
                <div class="info-grid" style="margin-top: 15px;">
                    <div class="info-label">ID Pembayaran</div>
                    <div class="info-value" style="font-family: monospace;">{record.id}</div>
                    <div class="info-label">Waktu Transaksi</div>
                    <div class="info-value">{record.timestamp}</div>
                </div>
            </div>

            <div class="instructions">
                <div class="section-title" style="color: #2d3748;">Instruksi Transfer</div>
                <ol style="margin: 0; padding-left: 20px; color: #4a5568;">
                    <li>Transfer tepat sejumlah <strong>{display.transfer}</strong></li>
                    <li>
                        Ke rekening:
                        <ul>
{banks}
                        </ul>
                    </li>
                    <li>Atas nama: <strong>{escape(institution)}</strong></li>
                    <li>Gunakan ID Pembayaran sebagai referensi</li>
                    <li>Simpan bukti transfer untuk verifikasi</li>
                </ol>
            </div>
        </div>

        <div class="footer">
            <p>Email ini dikirim secara otomatis. Mohon tidak membalas email ini.</p>
            <p>Hubungi administrasi jika ada pertanyaan.</p>
            <p>&copy; {datetime.now().year} Sistem Pembayaran Online - {escape(institution)}</p>
        </div>
    </div>
</body>
</html>
"""


def render_text(record: PaymentRecord, display: PaymentDisplay, institution: str) -> str:
    """Plain-text fallback of the same confirmation."""
    banks = ", ".join(f"{bank} {number}" for bank, number in BANK_ACCOUNTS)
    return f"""KONFIRMASI PEMBAYARAN BERHASIL

Halo {record.name},

Pembayaran Anda telah berhasil direkam. Berikut detail pembayaran:

INFORMASI MAHASISWA:
- Nama: {record.name}
- Email: {record.email}
- NIM: {record.student_id}
- Program Studi: {record.program}
- Semester: Semester {record.semester}

DETAIL PEMBAYARAN:
- ID Pembayaran: {record.id}
- Jumlah Pembayaran: {display.base}
- Kode Unik: {display.unique_code}
- Total: {display.transfer}
- Waktu: {record.timestamp}

INSTRUKSI TRANSFER:
1. Transfer tepat sejumlah {display.transfer}
2. Ke rekening: {banks}
3. Atas nama: {institution}
4. Gunakan ID Pembayaran sebagai referensi

Email ini dikirim secara otomatis. Mohon tidak membalas.

Salam,
Sistem Pembayaran Online
{institution}
"""
