"""MCA21 company master data mock dataset, keyed by CIN."""

MCA21_DATABASE: dict[str, dict] = {
    "U12345MH2010PLC123456": {
        "cinNumber": "U12345MH2010PLC123456",
        "companyName": "ABC Properties Private Limited",
        "registeredAddress": "10th Floor, Express Towers, Nariman Point, Mumbai - 400021",
        "dateOfIncorporation": "2010-05-15",
        "authorizedCapital": 10000000,
        "paidUpCapital": 5000000,
        "companyStatus": "Active",
        "directors": [
            {
                "name": "Vikram Mehta",
                "din": "00123456",
                "designation": "Managing Director",
                "appointmentDate": "2010-05-15",
            },
            {
                "name": "Sunita Sharma",
                "din": "00654321",
                "designation": "Director",
                "appointmentDate": "2010-05-15",
            },
            {
                "name": "Rahul Kapoor",
                "din": "00789012",
                "designation": "Director",
                "appointmentDate": "2015-08-20",
            },
        ],
        "propertyHoldings": [
            {
                "propertyId": "MH7654321",
                "registrationNumber": "REG/MH/2021/54321",
                "address": "456, Marine Drive, Mumbai - 400020",
                "type": "Commercial Office",
                "area": "5000 sq ft",
                "acquisitionDate": "2021-06-20",
                "acquisitionValue": 120000000,
                "encumbrances": [],
            },
            {
                "propertyId": "DL9876543",
                "registrationNumber": "REG/DL/2018/87654",
                "address": "Plot 123, Sector 44, Gurugram - 122003",
                "type": "Commercial Land",
                "area": "10000 sq ft",
                "acquisitionDate": "2018-11-10",
                "acquisitionValue": 200000000,
                "encumbrances": [
                    {
                        "type": "Mortgage",
                        "holder": "ICICI Bank",
                        "amount": 150000000,
                        "dateCreated": "2018-12-05",
                        "dateExpiry": "2028-12-04",
                        "status": "Active",
                        "details": "Corporate loan against property",
                    }
                ],
            },
        ],
        "financialInformation": {
            "lastFiledYear": "2022-2023",
            "turnover": 250000000,
            "netWorth": 180000000,
            "profitAfterTax": 35000000,
        },
        "lastUpdated": "2023-04-01T10:00:00Z",
        "mca21SpecificField": "Sample MCA21 specific data",
    },
    "L67890KA2015PLC654321": {
        "cinNumber": "L67890KA2015PLC654321",
        "companyName": "XYZ Developers Limited",
        "registeredAddress": "42, MG Road, Bangalore - 560001",
        "dateOfIncorporation": "2015-02-28",
        "authorizedCapital": 500000000,
        "paidUpCapital": 300000000,
        "companyStatus": "Active",
        "directors": [
            {
                "name": "Arjun Singh",
                "din": "00345678",
                "designation": "Chairman",
                "appointmentDate": "2015-02-28",
            },
            {
                "name": "Priya Patel",
                "din": "00876543",
                "designation": "Managing Director",
                "appointmentDate": "2015-02-28",
            },
            {
                "name": "Sanjay Gupta",
                "din": "00901234",
                "designation": "Independent Director",
                "appointmentDate": "2018-04-15",
            },
            {
                "name": "Meera Reddy",
                "din": "00567890",
                "designation": "Independent Director",
                "appointmentDate": "2018-04-15",
            },
        ],
        "propertyHoldings": [
            {
                "propertyId": "KA1122334",
                "registrationNumber": "REG/KA/2021/11223",
                "address": "101, Koramangala, Bangalore - 560034",
                "type": "Residential Complex",
                "area": "50000 sq ft",
                "acquisitionDate": "2016-07-12",
                "acquisitionValue": 500000000,
                "encumbrances": [
                    {
                        "type": "Mortgage",
                        "holder": "Axis Bank",
                        "amount": 350000000,
                        "dateCreated": "2016-08-01",
                        "dateExpiry": "2026-07-31",
                        "status": "Active",
                        "details": "Project finance",
                    }
                ],
            },
            {
                "propertyId": "TN5544332",
                "registrationNumber": "REG/TN/2019/55443",
                "address": "Plot 78, OMR Road, Chennai - 600097",
                "type": "IT Park",
                "area": "100000 sq ft",
                "acquisitionDate": "2019-03-25",
                "acquisitionValue": 800000000,
                "encumbrances": [
                    {
                        "type": "Mortgage",
                        "holder": "HDFC Bank",
                        "amount": 600000000,
                        "dateCreated": "2019-04-10",
                        "dateExpiry": "2029-04-09",
                        "status": "Active",
                        "details": "Project finance",
                    }
                ],
            },
        ],
        "financialInformation": {
            "lastFiledYear": "2022-2023",
            "turnover": 1200000000,
            "netWorth": 750000000,
            "profitAfterTax": 180000000,
        },
        "lastUpdated": "2023-05-12T08:30:00Z",
        "mca21SpecificField": "Sample MCA21 specific data",
    },
    "U98765DL2012PLC987654": {
        "cinNumber": "U98765DL2012PLC987654",
        "companyName": "Sharma Realty Private Limited",
        "registeredAddress": "14, Nehru Place, New Delhi - 110019",
        "dateOfIncorporation": "2012-09-03",
        "authorizedCapital": 25000000,
        "paidUpCapital": 10000000,
        "companyStatus": "Active",
        "directors": [
            {
                "name": "Amit Sharma",
                "din": "00456789",
                "designation": "Managing Director",
                "appointmentDate": "2012-09-03",
            },
            {
                "name": "Neha Sharma",
                "din": "00456790",
                "designation": "Director",
                "appointmentDate": "2012-09-03",
            },
        ],
        "propertyHoldings": [
            {
                "propertyId": "DL8765432",
                "registrationNumber": "REG/DL/2020/87654",
                "address": "789, Vasant Vihar, New Delhi - 110057",
                "type": "Residential House",
                "area": "3200 sq ft",
                "acquisitionDate": "2020-08-01",
                "acquisitionValue": 42000000,
                "encumbrances": [
                    {
                        "type": "Mortgage",
                        "holder": "HDFC Bank",
                        "amount": 15000000,
                        "dateCreated": "2020-08-15",
                        "dateExpiry": "2040-08-14",
                        "status": "Active",
                        "details": "Home loan against property",
                    }
                ],
            }
        ],
        "financialInformation": {
            "lastFiledYear": "2022-2023",
            "turnover": 18000000,
            "netWorth": 32000000,
            "profitAfterTax": 2100000,
        },
        "lastUpdated": "2022-12-01T11:00:00Z",
        "mca21SpecificField": "Sample MCA21 specific data",
    },
}
