"""Sample mbox messages shared by the tests."""

PLAIN_MESSAGE = """\
From alice@example.com Thu Jun 11 14:03:01 2009
From: Alice <alice@example.com>
To: Bob <bob@example.com>
Subject: Hello
Date: Thu, 11 Jun 2009 14:03:01 -0400
Message-ID: <plain-1@example.com>
X-Gmail-Labels: Inbox,Important
Content-Type: text/plain; charset=utf-8

Hi Bob,
See you soon.

"""

MULTIPART_MESSAGE = """\
From carol@example.com Tue Mar 02 09:05:03 2021
From: Carol <carol@example.com>
To: Dave <dave@example.com>
Cc: Erin <erin@example.com>
Subject: Newsletter
Date: Tue 02 Mar 2021 9:5:3 EST
Message-ID: <multi-1@example.com>
In-Reply-To: <plain-1@example.com>
References: <plain-1@example.com>
MIME-Version: 1.0
Content-Type: multipart/alternative; boundary="BOUNDARY"

--BOUNDARY
Content-Type: text/html; charset=utf-8

<p>Hello <b>Dave</b></p>
--BOUNDARY
Content-Type: text/plain; charset=utf-8

Hello Dave
--BOUNDARY--

"""

SPAM_MESSAGE = """\
From spammer@example.net Sat Jan 01 00:00:00 2022
From: Spammer <spammer@example.net>
To: Bob <bob@example.com>
Subject: You won
Date: Sat, 1 Jan 2022 00:00:00 +0000
Message-ID: <spam-1@example.net>
X-Gmail-Labels: Spam,Unread
Content-Type: text/plain

Click here.

"""

MALFORMED_DATE_MESSAGE = """\
From frank@example.org Mon Jan 01 00:00:00 2001
From: Frank <frank@example.org>
To: Bob <bob@example.com>
Subject: When?
Date: sometime last week
Message-ID: <when-1@example.org>
X-Gmail-Labels: Inbox
Content-Type: text/plain

No idea.

"""

TRASH_MESSAGE = """\
From grace@example.com Wed Feb 02 10:00:00 2022
From: Grace <grace@example.com>
To: Bob <bob@example.com>
Subject: Old
Date: Wed, 2 Feb 2022 10:00:00 +0100
Message-ID: <trash-1@example.com>
X-Gmail-Labels: Trash
Content-Type: text/plain

Delete me.

"""

# Takeout export layout: folded transport headers ahead of From/Subject/Date,
# a folded Subject and folded Content-Type parameters in both header sections.
GMAIL_MESSAGE = """\
From 1302741234567890123@xxx Thu Jun 11 18:03:01 +0000 2009
X-GM-THRID: 1302741234567890123
X-Gmail-Labels: Inbox,Opened
Delivered-To: bob@example.com
Received: by 10.100.1.1 with SMTP id abc123;
        Thu, 11 Jun 2009 11:03:05 -0700 (PDT)
DKIM-Signature: v=1; a=rsa-sha256; c=relaxed/relaxed;
        d=example.com; s=gamma;
        h=domainkey-signature:mime-version:received:date:message-id:subject
         :from:to:content-type;
        bh=47DEQpj8HBSa+/TImW+5JCeuQeRkm5NMpJWZG3hSuFU=;
        b=Zm9vYmFyYmF6
From: Heidi <heidi@example.com>
To: Bob <bob@example.com>
Subject: Weekly report
 for June
Date: Thu, 11 Jun 2009 14:03:01 -0400
Message-ID: <gmail-1@example.com>
MIME-Version: 1.0
Content-Type: multipart/alternative;
\tboundary="00163646d8b4a2f3c5046c16b7f1"

--00163646d8b4a2f3c5046c16b7f1
Content-Type: text/plain;
\tcharset=ISO-8859-1

Numbers attached.
--00163646d8b4a2f3c5046c16b7f1
Content-Type: text/html; charset=ISO-8859-1

<p>Numbers attached.</p>
--00163646d8b4a2f3c5046c16b7f1--

"""


def build_mbox(*messages: str) -> bytes:
    return "".join(messages).encode("utf-8")
